from io import BytesIO

from pypdf import PdfReader


class PDFLoader:

    MIME_TYPES = {"application/pdf"}

    def supports(self, mime_type: str) -> bool:
        return mime_type in self.MIME_TYPES

    def load(self, data: bytes) -> str:
        reader = PdfReader(BytesIO(data))
        text_parts = []
        for page in reader.pages:
            text = page.extract_text()
            if text:
                text_parts.append(text.strip())
        return "\n\n".join(text_parts)
