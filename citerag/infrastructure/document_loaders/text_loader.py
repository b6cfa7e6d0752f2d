class TextLoader:

    def supports(self, mime_type: str) -> bool:
        return mime_type.startswith("text/")

    def load(self, data: bytes) -> str:
        return data.decode("utf-8", errors="replace")
