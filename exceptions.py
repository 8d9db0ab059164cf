class ProfessorBotError(Exception):
    """Base class for failures that end a chat request."""


class InputError(ProfessorBotError):
    def __init__(self, detail: str = "No content provided."):
        super().__init__(detail)


class UpstreamError(ProfessorBotError):
    """An embedding, vector search or generation call failed."""

    def __init__(self, service: str, detail):
        self.service = service
        super().__init__(f"{service} request failed: {detail}")
