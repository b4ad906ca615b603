"""
Exiftool Metadata Normalizer Lambda Function.

This Lambda function receives raw exiftool records (already parsed into
key/value objects by an upstream pipeline node) and returns them mapped
to the canonical image metadata record.
"""

import json
import os
from typing import Any, Dict, List

from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext

from exiftool_normalizer.exiftool import ExiftoolMapper
from exiftool_normalizer.helpers import convert_datetime_objects, parse_bool

# ── config ─────────────────────────────────────────────────────────
logger = Logger()


def _numeric_gps_from_env() -> bool:
    return parse_bool(os.environ.get("EXIFTOOL_NUMERIC_GPS", "true"))


def normalize_records(
    records: List[Dict[str, Any]], mapper: ExiftoolMapper
) -> List[Dict[str, Any]]:
    """
    Normalize each raw record, collecting one result per record.

    Args:
        records: Raw exiftool records
        mapper: Configured mapper

    Returns:
        List of JSON-safe result dictionaries
    """
    results: List[Dict[str, Any]] = []

    for index, record in enumerate(records):
        source_file = record.get("SourceFile") if isinstance(record, dict) else None
        result = mapper.normalize(record)

        if result.success:
            logger.info(
                f"Normalized record {index}",
                extra={
                    "source_file": source_file,
                    "warning_count": len(result.validation.warnings),
                },
            )
            status = "OK"
        else:
            logger.error(
                f"Failed to normalize record {index}",
                extra={
                    "source_file": source_file,
                    "errors": [issue.message for issue in result.validation.errors],
                },
            )
            status = "ERROR"

        entry = {"index": index, "status": status, **result.to_dict()}
        if source_file is not None:
            entry["sourceFile"] = source_file
        results.append(convert_datetime_objects(entry))

    return results


# ── handler ────────────────────────────────────────────────────────
@logger.inject_lambda_context
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Normalize a batch of raw exiftool records.

    Args:
        event: Lambda event containing payload.records and an optional
            payload.numericGps flag
        context: Lambda context

    Returns:
        dict: Response with statusCode and results array
    """
    payload = event.get("payload", {})
    records = payload.get("records", [])

    if not records:
        logger.warning("No records found in event.payload.records")
        return {
            "statusCode": 200,
            "body": json.dumps({"message": "No records to process", "results": []}),
        }

    try:
        numeric_gps = payload.get("numericGps")
        numeric_gps = (
            _numeric_gps_from_env() if numeric_gps is None else parse_bool(numeric_gps)
        )
    except ValueError as e:
        logger.error("Invalid numericGps setting", extra={"error": str(e)})
        return {
            "statusCode": 400,
            "body": json.dumps({"message": str(e), "results": []}),
        }

    mapper = ExiftoolMapper({"numeric_gps": numeric_gps})
    logger.info(
        f"Processing {len(records)} records", extra={"numeric_gps": mapper.numeric}
    )

    results = normalize_records(records, mapper)

    return {
        "statusCode": 200,
        "body": json.dumps(
            {
                "message": f"Processed {len(results)} records",
                "results": results,
            },
            default=str,
        ),
    }
