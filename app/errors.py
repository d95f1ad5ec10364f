"""Error taxonomy for the podcast feed pipeline.

Every error carries the HTTP status and the plain-text message served to the
client. Messages are in Portuguese, matching the audience of the feed.
"""


class FeedError(Exception):
    """Base class for failures surfaced to the client as plain text."""

    status_code = 500
    prefix = "Erro interno"

    def __init__(self, detail: str = ""):
        self.detail = detail
        super().__init__(self.message)

    @property
    def message(self) -> str:
        if self.detail:
            return f"{self.prefix}: {self.detail}"
        return self.prefix


class FetchError(FeedError):
    """Upstream transport failure or non-success status."""

    prefix = "Erro ao buscar o feed do podcast"


class ParseError(FeedError):
    """The feed document is not well-formed XML."""

    prefix = "Erro ao analisar os dados do podcast"


class MalformedItemError(ParseError):
    """An <item> lacks its enclosure element or the enclosure has no attributes."""

    def __init__(self, index: int, reason: str):
        self.index = index
        self.reason = reason
        super().__init__(f"item {index}: {reason}")


class EncodeError(FeedError):
    """The item sequence could not be serialized."""

    prefix = "Erro ao gerar JSON"


class UnsupportedMethodError(FeedError):
    """Request method other than GET or OPTIONS."""

    status_code = 405
    prefix = "Método não permitido"

    def __init__(self, method: str = ""):
        self.method = method
        super().__init__()
