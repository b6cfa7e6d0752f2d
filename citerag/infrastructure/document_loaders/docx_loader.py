from io import BytesIO

from docx import Document


class DocxLoader:

    # Legacy .doc is accepted but only parses when the payload is really OOXML.
    MIME_TYPES = {
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        "application/msword",
    }

    def supports(self, mime_type: str) -> bool:
        return mime_type in self.MIME_TYPES

    def load(self, data: bytes) -> str:
        doc = Document(BytesIO(data))
        paragraphs = [p.text.strip() for p in doc.paragraphs if p.text.strip()]
        return "\n\n".join(paragraphs)
