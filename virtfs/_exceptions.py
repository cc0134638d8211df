class VFSChangeCallbackError(RuntimeError):
    """Raised after a mutation when one or more change callbacks failed.

    The mutation itself has already been applied and every matched watch
    token has fired; ``errors`` holds the exceptions raised by callbacks.
    """
    def __init__(self, errors: list[BaseException]) -> None:
        self.errors = list(errors)
        super().__init__(
            f"VFS change notification: {len(self.errors)} callback(s) raised "
            f"({', '.join(type(e).__name__ for e in self.errors)})."
        )
