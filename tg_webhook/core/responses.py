"""Response classes."""

from starlette.responses import JSONResponse as _StarletteJSONResponse


class JSONResponse(_StarletteJSONResponse):
    """Compact JSON response with an explicit utf-8 charset."""

    media_type = "application/json; charset=utf-8"
