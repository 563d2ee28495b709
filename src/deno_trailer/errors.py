ERRORS = {
  "E_TRAILER_TRUNCATED": "File is too short to contain a trailer",
  "E_TRAILER_MAGIC": "This file is not a deno executable, failed to parse trailer",
  "E_PAYLOAD_RANGE": "Metadata offset precedes bundle offset",
  "E_PAYLOAD_TRUNCATED": "Bundle extends past the end of the file",
  "E_IO": "Filesystem operation failed",
}


class UnpackError(Exception):
    code = "E_IO"
    stage = "input"

    def __init__(self, detail: str | None = None, stage: str | None = None):
        if stage is not None:
            self.stage = stage
        self.detail = detail
        message = ERRORS[self.code]
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)

    def as_dict(self) -> dict:
        return {"code": self.code, "stage": self.stage, "message": str(self)}

    def one_line(self) -> str:
        return f"[{self.code}] {self.stage}: {self}"


class TruncatedTrailer(UnpackError):
    code = "E_TRAILER_TRUNCATED"
    stage = "trailer"


class InvalidMagic(UnpackError):
    code = "E_TRAILER_MAGIC"
    stage = "trailer"


class InvalidRange(UnpackError):
    code = "E_PAYLOAD_RANGE"
    stage = "payload"


class TruncatedPayload(UnpackError):
    code = "E_PAYLOAD_TRUNCATED"
    stage = "payload"


class UnpackIOError(UnpackError):
    code = "E_IO"
