"""Interface layer errors."""


class InterfaceError(Exception):
    """Base interface error."""

    pass


class APIError(InterfaceError):
    """Error reported to API clients as an OAuth-style JSON body."""

    def __init__(self, status_code: int, error: str, description: str):
        self.status_code = status_code
        self.error = error
        self.description = description
        super().__init__(f"{error}: {description}")

    def to_response(self) -> dict[str, str]:
        """Render the JSON error body."""
        return {"error": self.error, "error_description": self.description}


def method_not_allowed() -> APIError:
    """Error for requests using an unsupported HTTP method."""
    return APIError(405, "invalid_request", "method not allowed")
