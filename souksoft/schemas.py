"""Schemas for the print operations and the local bridge."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PrintRequest(BaseModel):
    """A single receipt print request.

    Accepts the front-end's field names (html, paperWidth, printerName)
    as well as the Python ones.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    html_content: str = Field(..., min_length=1, alias="html", description="Receipt markup")
    paper_width_mm: int | None = Field(
        None, gt=0, alias="paperWidth", description="Paper width in millimeters"
    )
    printer_name: str | None = Field(
        None, alias="printerName", description="Target printer (None = default)"
    )

    @field_validator("printer_name")
    @classmethod
    def blank_printer_means_default(cls, value: str | None) -> str | None:
        """Trim the printer name; a blank name selects the default printer."""
        if value is None:
            return None
        return value.strip() or None


class GreetRequest(BaseModel):
    """Schema for the greeting stub."""

    name: str = ""


class GreetResponse(BaseModel):
    """Greeting text."""

    message: str


class PrinterListResponse(BaseModel):
    """Printers installed on the host."""

    printers: list[str]


class PrintResponse(BaseModel):
    """Result of a successful print dispatch."""

    success: bool = True


class HealthResponse(BaseModel):
    """Bridge liveness information."""

    status: str = "ok"
    version: str
    host_family: str
