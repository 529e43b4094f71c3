import json
import logging
from typing import Dict, List, Optional, Tuple

from ..config import (
    BLANK_HEADER_BASE,
    DATA_CELL_SELECTOR,
    GENERATED_HEADER_PREFIX,
    HEADER_CELL_SELECTOR,
    HEADER_CELL_TAG,
    HEADER_SECTION_TAG,
    JSON_ENSURE_ASCII,
    JSON_INDENT,
    ROW_SELECTOR,
    ROW_TAG,
)
from ..elements.base_element import BaseTableElement

logger = logging.getLogger(__name__)

Record = Dict[str, Optional[str]]


class HTMLTableExtractor:
    """Extractor for HTML tables reached through a BaseTableElement"""

    @staticmethod
    def get_headers(table: BaseTableElement) -> Tuple[List[str], bool]:
        """
        Resolve the header names of a table

        Headers come from the header section if there is one, otherwise from
        the first row (th cells first, then td cells), otherwise they are
        synthesized from the cell count of the first data row.

        Args:
            table (BaseTableElement): The table element

        Returns:
            Tuple[List[str], bool]: Deduplicated headers and whether the first
                data row must be skipped because it was used as the header row
        """
        skip_first_row = False
        headers: List[str] = []

        header_sections = table.find_all_by_tag(HEADER_SECTION_TAG)
        if header_sections:
            headers.extend(th.trimmed_text() for th in header_sections[0].find_all_by_tag(HEADER_CELL_TAG))
        else:
            all_rows = table.find_all_by_tag(ROW_TAG)
            if all_rows:
                first_row = all_rows[0]
                header_cells = first_row.find_all_by_selector(HEADER_CELL_SELECTOR)
                if header_cells:
                    headers.extend(th.trimmed_text() for th in header_cells)
                    skip_first_row = True
                else:
                    data_cells = first_row.find_all_by_selector(DATA_CELL_SELECTOR)
                    if data_cells:
                        headers.extend(td.trimmed_text() for td in data_cells)
                        skip_first_row = True

        # Generate positional headers if none found
        if not headers:
            data_rows = HTMLTableExtractor.get_rows(table, skip_first_row=False)
            if data_rows:
                cell_count = len(data_rows[0].find_all_by_selector(DATA_CELL_SELECTOR))
                headers.extend(f"{GENERATED_HEADER_PREFIX}_{i}" for i in range(1, cell_count + 1))

        headers = HTMLTableExtractor.process_headers(headers)
        logger.debug("Resolved %d headers (skip_first_row=%s): %s", len(headers), skip_first_row, headers)
        return headers, skip_first_row

    @staticmethod
    def process_headers(headers: List[str]) -> List[str]:
        """Make header names unique; blank names count as "Column"."""
        header_counts: Dict[str, int] = {}
        processed_headers = []

        for header in headers:
            base_header = header if header and header.strip() else BLANK_HEADER_BASE
            if base_header in header_counts:
                header_counts[base_header] += 1
                processed_headers.append(f"{base_header}_{header_counts[base_header]}")
            else:
                header_counts[base_header] = 1
                processed_headers.append(base_header)

        return processed_headers

    @staticmethod
    def get_rows(table: BaseTableElement, skip_first_row: bool = False) -> List[BaseTableElement]:
        """Rows outside the header section in document order, optionally without the first one"""
        rows = table.find_all_by_selector(ROW_SELECTOR)
        if skip_first_row and rows:
            rows = rows[1:]
        return rows

    @staticmethod
    def process_rows(rows: List[BaseTableElement], headers: List[str]) -> List[Record]:
        """
        Build one record per row whose cell count matches the header count

        Rows with a different number of cells are dropped, not padded.
        Cells that are empty after trimming become None.
        """
        records = []

        for index, row in enumerate(rows):
            cells = row.find_all_by_selector(DATA_CELL_SELECTOR)
            if len(cells) != len(headers):
                logger.debug("Dropping row %d: %d cells, expected %d", index, len(cells), len(headers))
                continue

            record: Record = {}
            for header, cell in zip(headers, cells):
                cell_text = cell.trimmed_text()
                record[header] = cell_text if cell_text else None
            records.append(record)

        return records

    @staticmethod
    def extract_table(table: BaseTableElement) -> Tuple[List[str], List[Record]]:
        """Run the header, row and record steps; return the headers with the records"""
        headers, skip_first_row = HTMLTableExtractor.get_headers(table)
        rows = HTMLTableExtractor.get_rows(table, skip_first_row)
        return headers, HTMLTableExtractor.process_rows(rows, headers)

    @staticmethod
    def extract_records(table: BaseTableElement) -> List[Record]:
        _, records = HTMLTableExtractor.extract_table(table)
        return records

    @staticmethod
    def to_json(records: List[Record], indent: Optional[int] = JSON_INDENT,
                ensure_ascii: bool = JSON_ENSURE_ASCII) -> str:
        """Serialize records to a JSON array, keeping header order"""
        return json.dumps(records, indent=indent, ensure_ascii=ensure_ascii)
