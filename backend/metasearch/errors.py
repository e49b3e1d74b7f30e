class SearchError(Exception):
    """Base search error with status code and message"""

    def __init__(self, message, status_code=500):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def to_dict(self):
        return {"message": self.message}


class ProviderError(SearchError):
    """A search provider call failed (network, HTTP status or payload)"""

    def __init__(self, provider, message, status_code=500):
        super().__init__(f"{provider}: {message}", status_code)
        self.provider = provider
