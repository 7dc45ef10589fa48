from app.extraction.client_base import BaseExtractionClient
from app.extraction.extractor import Extractor
from app.extraction.factory import ExtractorFactory
from app.extraction.parser import parse_response

__all__ = ["BaseExtractionClient", "Extractor", "ExtractorFactory", "parse_response"]
