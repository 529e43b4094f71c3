import logging
import traceback
from functools import wraps
from typing import Any, Dict, List, Optional

from bs4 import BeautifulSoup
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, Field
from soupsieve import SelectorSyntaxError

from .config import CORS_ALLOW_ORIGINS, DEFAULT_BACKEND, LOG_LEVEL, MAX_HTML_SIZE
from .elements.soup_element import SoupTableElement
from .main import ELEMENT_ADAPTERS, TableConverter

# Configure logging
logging.basicConfig(
    level=LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="HTML Table to JSON API",
    description="API for converting HTML tables into JSON records",
    version="1.0.0"
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Pydantic models for request/response
class TableRequest(BaseModel):
    html: str = Field(..., min_length=1)
    selector: str = "table"
    table_index: int = Field(0, ge=0)


class TableResponse(BaseModel):
    headers: List[str]
    data: List[Dict[str, Optional[str]]]
    row_count: int


# Error handling decorator
def handle_conversion_errors(func):
    @wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except HTTPException:
            raise
        except Exception as e:
            logger.error(
                f"Error in {func.__name__}:\n"
                f"Error: {str(e)}\n"
                f"Traceback:\n{traceback.format_exc()}"
            )
            raise HTTPException(
                status_code=500,
                detail={
                    "message": str(e),
                    "error_type": e.__class__.__name__
                }
            )

    return wrapper


def locate_table(request: TableRequest) -> SoupTableElement:
    """Parse the posted HTML and pick the requested table"""
    if len(request.html.encode('utf-8')) > MAX_HTML_SIZE:
        raise HTTPException(
            status_code=413,
            detail=f"HTML document exceeds the maximum size of {MAX_HTML_SIZE} bytes"
        )

    soup = BeautifulSoup(request.html, 'html.parser')
    try:
        tables = soup.select(request.selector)
    except SelectorSyntaxError as e:
        raise HTTPException(status_code=400, detail=f"Invalid selector: {e}")
    if request.table_index >= len(tables):
        raise HTTPException(
            status_code=404,
            detail=f"No table found for selector '{request.selector}' at index {request.table_index}"
        )

    logger.info("Converting table %d of %d matched by '%s'", request.table_index, len(tables), request.selector)
    return SoupTableElement(tables[request.table_index])


# Routes

@app.get("/backends")
async def get_backends():
    return {
        "backends": list(ELEMENT_ADAPTERS),
        "default": DEFAULT_BACKEND
    }


@app.post("/convert-table", response_model=TableResponse)
@handle_conversion_errors
async def convert_table(request: TableRequest):
    """
    Convert a table from posted HTML into JSON records.

    Args:
        request: The request containing:
            - html: The HTML document or fragment
            - selector: CSS selector used to locate tables (default "table")
            - table_index: Which of the matched tables to convert

    Returns:
        Dict containing:
        - headers: The resolved, deduplicated header names
        - data: One record per accepted row
        - row_count: Number of records
    """
    table = locate_table(request)
    headers, records = TableConverter().extract_table(table)
    return {
        "headers": headers,
        "data": records,
        "row_count": len(records)
    }


@app.post("/convert-table/json")
@handle_conversion_errors
async def convert_table_json(request: TableRequest):
    """Convert a table from posted HTML and return the serialized JSON text as is."""
    table = locate_table(request)
    content = TableConverter().convert(table)
    return Response(content=content, media_type="application/json")


# Error handler
@app.exception_handler(Exception)
async def global_exception_handler(request, exc: Exception) -> Any:
    logger.error(f"Unhandled error: {exc}\n{traceback.format_exc()}")
    return JSONResponse(
        status_code=500,
        content={
            "message": str(exc),
            "error_type": exc.__class__.__name__
        }
    )
