import csv
import io

from fastapi import FastAPI, UploadFile, File, HTTPException
from fastapi.responses import Response

from .convert import convert_stream
from .errors import SchemaError, StructuralError
from .models import ConversionFailure, HealthResponse
from .source import RecordReader, detect_encoding

app = FastAPI(
    title="stockitems",
    description="Validated CSV to JSON conversion for stock item records",
    version="0.1.0",
)


def _failure(issue: str, message: str, **context) -> HTTPException:
    detail = ConversionFailure(issue=issue, message=message, **context)
    return HTTPException(status_code=422, detail=detail.model_dump())


@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}


@app.post("/convert")
async def convert_csv(file: UploadFile = File(...)):
    if not file.filename.lower().endswith(".csv"):
        raise HTTPException(status_code=422, detail="Only CSV files are supported")

    raw = await file.read()
    encoding = detect_encoding(raw)
    try:
        text = raw.decode(encoding)
    except (UnicodeDecodeError, LookupError) as e:
        raise _failure("undecodable_input", str(e))

    out = io.StringIO()
    try:
        count = convert_stream(RecordReader(io.StringIO(text, newline="")), out)
    except SchemaError as e:
        raise _failure("schema_mismatch", str(e))
    except StructuralError as e:
        raise _failure(
            "invalid_record",
            e.message,
            line=e.line,
            field=e.field,
            value=e.value,
            item_id=e.item_id,
        )
    except csv.Error as e:
        raise _failure("malformed_csv", str(e))

    return Response(
        content=out.getvalue(),
        media_type="application/json",
        headers={"X-Item-Count": str(count)},
    )
