"""Document loader implementations."""
from .pdf_loader import PDFLoader
from .docx_loader import DocxLoader
from .text_loader import TextLoader
from .composite_loader import CompositeLoader, guess_mime_type

__all__ = ["PDFLoader", "DocxLoader", "TextLoader", "CompositeLoader", "guess_mime_type"]
