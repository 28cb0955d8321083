"""Exception types raised by the edit pipeline"""


class VibeForgeError(Exception):
    """Base class for all application errors"""

    message = "Unexpected error."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        self.message = message or self.message


class ConfigurationError(VibeForgeError):
    message = "Invalid configuration."


# --- caller mistakes, answered with 400 ---


class ClientInputError(VibeForgeError):
    status_code = 400


class BlankPromptError(ClientInputError):
    message = "Prompt is required."


class InvalidPathError(ClientInputError):
    message = "Invalid current page provided."


# --- unusable model output, answered with 502 ---


class UpstreamShapeError(VibeForgeError):
    status_code = 502


class EmptyResponseError(UpstreamShapeError):
    message = "No HTML content returned from model."


class NotHtmlDocumentError(UpstreamShapeError):
    message = "Model response was not a complete HTML document."


class MarkdownFenceError(UpstreamShapeError):
    message = "Model response contained Markdown fences, which are not allowed."
