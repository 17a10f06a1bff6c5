from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Literal

PDFVersion = Literal["1.0", "1.1", "1.2", "1.3", "1.4", "1.5", "1.6", "1.7"]
PageModeName = Literal["UseNone", "UseOutlines", "UseThumbs", "FullScreen"]


class Settings(BaseSettings):
    # Document defaults
    pdf_version: PDFVersion = "1.2"
    page_mode: PageModeName = "UseNone"

    # Info dictionary
    creator: str = "pdfcreate"
    producer: str = "pdfcreate"

    # Serialization
    trace_sizes: bool = True

    class Config:
        env_prefix = "PDFCREATE_"
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
