from docscan.services.inference_base import InferenceBackend


class FakeBackend(InferenceBackend):
    """Returns a canned reply (or raises a canned error) and records every call."""

    def __init__(self, reply: str = "", error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.calls = []

    async def analyze(self, file_bytes: bytes, media_type: str, filename: str) -> str:
        self.calls.append((file_bytes, media_type, filename))
        if self.error is not None:
            raise self.error
        return self.reply
