# shellcore/exceptions.py


class AliasError(RuntimeError):
    pass


class AllocationFailure(AliasError):
    pass


class NoSuchAlias(AliasError):
    def __init__(self, key: str):
        super().__init__(f"no such alias key: {key}")
        self.key = key


class CommandError(Exception):
    """Handler failure whose message is shown to the user verbatim."""
    pass
