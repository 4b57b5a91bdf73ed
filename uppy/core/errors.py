class GatewayError(RuntimeError):
    """Base for every failure surfaced to the UI as an error string."""


class MissingConfigError(GatewayError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"{name} not found")


class StorageRequestError(GatewayError):
    """
    An S3 request failed. The message is "<step>: <underlying error>".

    Raised for the failing step only; earlier steps of the same call
    (the copy in a rename, the finalize in a multipart complete) stay committed.
    """
