# src/docsearch/core/errors.py
"""
Errors raised while loading search data.
"""


class MalformedDataError(ValueError):
    def __init__(self, message: str, source: str = "<string>"):
        self.source = source
        self.message = message
        super().__init__(f"{source}: {message}")
