class LinestampUserMessage(Exception):
    """
    This is the class of user messages, as distinct from programmer errors.
    When the stream can't be processed, there's nothing better to do than send a message to the user.
    When that happens, we don't need or want a stack trace.
    """


class NoBuffer(LinestampUserMessage):
    """The read buffer could not be allocated."""


class ReadFailure(LinestampUserMessage):
    """Reading the input stream failed."""


class WriteFailure(LinestampUserMessage):
    """Writing a stamp or line content to the output stream failed."""
