"""
Batch Rescoring Service

Re-runs the calculation pipeline over a CSV export of stored submissions, for
example after the scoring tables change or when sales asks for a ranked list.

Processing steps:
1. Parse the CSV using pandas
2. Validate required columns (only current_arr is mandatory)
3. Fill optional columns with defaults (0 for numbers, "" for text)
4. Validate numeric columns, reporting the offending row numbers
5. Evaluate every row and rank by lead score

Parsing never raises for bad data. Problems are returned as ValidationError
models alongside a None DataFrame, mirroring how uploads are reported to users.
"""

import io
import logging
from typing import BinaryIO, Dict, List, Optional, Tuple, Union

import pandas as pd

from backend.core.config import Settings
from backend.models import CompanyInputs, ValidationError
from backend.services.pipeline import CalculationPipeline


logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS - Column Definitions
# =============================================================================

# CSV column -> CompanyInputs field
NUMERIC_COLUMNS: Dict[str, str] = {
    'current_arr': 'currentARR',
    'monthly_leads': 'monthlyLeads',
    'average_deal_value': 'averageDealValue',
    'lead_response_time': 'leadResponseTimeHours',
    'monthly_free_signups': 'monthlyFreeSignups',
    'free_to_paid_conversion': 'freeToPaidConversionRate',
    'monthly_mrr': 'monthlyMRR',
    'failed_payment_rate': 'failedPaymentRate',
    'manual_hours': 'manualHoursPerWeek',
    'hourly_rate': 'hourlyRate',
}

TEXT_COLUMNS: Dict[str, str] = {
    'company_name': 'companyName',
    'contact_email': 'email',
    'industry': 'industry',
}

REQUIRED_COLUMNS: List[str] = ['current_arr']

# Passed through to the submission record, not an engine input
USER_ID_COLUMN = 'user_id'

# Read identifiers and names as text so values like "00123" keep their digits
TEXT_DTYPES = {column: str for column in [*TEXT_COLUMNS, USER_ID_COLUMN]}


# =============================================================================
# Parsing
# =============================================================================


def validate_columns(df: pd.DataFrame) -> List[ValidationError]:
    """Report required columns missing from the DataFrame."""
    errors: List[ValidationError] = []
    for column in REQUIRED_COLUMNS:
        if column not in df.columns:
            errors.append(ValidationError(
                field=column,
                message=f"Missing required column: {column}",
            ))
    return errors


def coerce_numeric_columns(df: pd.DataFrame) -> Tuple[pd.DataFrame, List[ValidationError]]:
    """
    Convert numeric columns to floats.

    Blank cells become 0. Non-blank cells that cannot be parsed as numbers are
    reported with their 1-based data row number.

    Returns:
        Tuple of (converted DataFrame, list of validation errors)
    """
    errors: List[ValidationError] = []
    df = df.copy()

    for column in NUMERIC_COLUMNS:
        if column not in df.columns:
            df[column] = 0.0
            continue

        original = df[column]
        converted = pd.to_numeric(original, errors='coerce')
        invalid_mask = converted.isna() & original.notna()

        for position in invalid_mask.to_numpy().nonzero()[0]:
            errors.append(ValidationError(
                field=column,
                message=f"Non-numeric value {original.iloc[position]!r} in column {column}",
                row_number=int(position) + 1,
            ))

        df[column] = converted.fillna(0.0).astype(float)

    return df, errors


def fill_text_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Ensure text columns exist and hold strings."""
    df = df.copy()
    for column in [*TEXT_COLUMNS, USER_ID_COLUMN]:
        if column not in df.columns:
            df[column] = ""
        df[column] = df[column].fillna("").astype(str)
    return df


def parse_submissions_csv(
    file: Union[BinaryIO, io.StringIO]
) -> Tuple[Optional[pd.DataFrame], List[ValidationError]]:
    """
    Parse and validate a submissions CSV export.

    Args:
        file: File object containing CSV data (bytes or text)

    Returns:
        Tuple of (validated DataFrame or None, list of validation errors)
    """
    errors: List[ValidationError] = []

    try:
        content = file.read()
        if isinstance(content, bytes):
            file_like = io.BytesIO(content)
        else:
            file_like = io.StringIO(content)

        df = pd.read_csv(file_like, dtype=TEXT_DTYPES)
    except pd.errors.EmptyDataError:
        errors.append(ValidationError(
            field='file',
            message='CSV file is empty or contains no data rows',
        ))
        return None, errors
    except (pd.errors.ParserError, UnicodeDecodeError) as e:
        errors.append(ValidationError(
            field='file',
            message=f'Failed to parse CSV file: {str(e)}',
        ))
        return None, errors

    if df.empty:
        errors.append(ValidationError(
            field='file',
            message='CSV file is empty or contains no data rows',
        ))
        return None, errors

    logger.info(f"Parsed CSV with {len(df)} rows and {len(df.columns)} columns")

    column_errors = validate_columns(df)
    if column_errors:
        return None, column_errors

    df, numeric_errors = coerce_numeric_columns(df)
    if numeric_errors:
        logger.warning(f"Rejected submissions CSV with {len(numeric_errors)} numeric error(s)")
        return None, numeric_errors

    return fill_text_columns(df), errors


# =============================================================================
# Rescoring
# =============================================================================


def row_to_inputs(row: Dict[str, object]) -> CompanyInputs:
    """Build CompanyInputs from one parsed CSV row."""
    values = {field: row[column] for column, field in NUMERIC_COLUMNS.items()}
    values.update({field: row[column] for column, field in TEXT_COLUMNS.items()})
    return CompanyInputs(**values)


def rescore_submissions(
    df: pd.DataFrame,
    settings: Optional[Settings] = None
) -> pd.DataFrame:
    """
    Evaluate every parsed submission and rank by lead score.

    Args:
        df: DataFrame returned by parse_submissions_csv
        settings: Optional settings override

    Returns:
        DataFrame of submission records plus confidence, is_valid and
        warning_count, sorted by lead_score descending (ties keep file order)
    """
    pipeline = CalculationPipeline(settings)
    rows = []

    for row in df.to_dict(orient='records'):
        outcome = pipeline.evaluate(row_to_inputs(row), str(row[USER_ID_COLUMN]))
        record = outcome.submission.model_dump()
        record['confidence'] = outcome.confidence.level.value
        record['is_valid'] = outcome.validation.overall.isValid
        record['warning_count'] = len(outcome.validation.overall.warnings)
        rows.append(record)

    result = pd.DataFrame(rows)
    if result.empty:
        return result

    logger.info(f"Rescored {len(result)} submissions")
    return result.sort_values('lead_score', ascending=False, kind='mergesort').reset_index(drop=True)


__all__ = [
    "parse_submissions_csv",
    "rescore_submissions",
    "validate_columns",
    "coerce_numeric_columns",
    "fill_text_columns",
    "row_to_inputs",
    "NUMERIC_COLUMNS",
    "TEXT_COLUMNS",
    "REQUIRED_COLUMNS",
]
