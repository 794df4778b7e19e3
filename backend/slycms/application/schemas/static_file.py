from pydantic import BaseModel, Field


class StaticFileResponse(BaseModel):
    """JSON projection returned after writing a static file."""

    path: str = Field(..., alias="Path", examples=["/static/css/styles.css"])
    size: int = Field(..., alias="Size")

    model_config = {"populate_by_name": True}
