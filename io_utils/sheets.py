# io_utils/sheets.py
"""
Google Sheets IO for tabular choice declarations.
No Streamlit dependencies - credentials are passed in as a plain dict.
"""

from typing import List

import pandas as pd
import gspread
from google.auth.exceptions import GoogleAuthError
from gspread.exceptions import (
    SpreadsheetNotFound,
    WorksheetNotFound,
    APIError,
    NoValidUrlKeyFound
)
from gspread_dataframe import set_with_dataframe

from io_utils.declaration import Declaration, declaration_from_dataframe, tree_to_dataframe
from logic.tree import DecisionTree
from utils import DECLARATION_HEADERS, normalize_text


SCOPES = [
    "https://www.googleapis.com/auth/spreadsheets",
    "https://www.googleapis.com/auth/drive",
]


# ===== Google Sheets Authentication =====

def get_gspread_client_from_secrets(secrets_dict: dict) -> gspread.Client:
    """
    Create a gspread client using service account credentials.

    Args:
        secrets_dict: Service account credentials dictionary

    Returns:
        gspread.Client: Authenticated client

    Raises:
        GoogleAuthError: If authentication fails
        ValueError: If required fields are missing
    """
    from google.oauth2.service_account import Credentials

    try:
        credentials = Credentials.from_service_account_info(secrets_dict, scopes=SCOPES)
        return gspread.authorize(credentials)
    except GoogleAuthError as e:
        raise GoogleAuthError(
            "Google Sheets authentication failed. Please check your service account credentials."
        ) from e
    except KeyError as e:
        raise ValueError(
            f"Missing required field in service account: {e}. Please check your configuration."
        ) from e


def open_spreadsheet(client: gspread.Client, spreadsheet_id: str) -> gspread.Spreadsheet:
    """
    Open a Google Spreadsheet by ID.

    Raises:
        SpreadsheetNotFound: If spreadsheet doesn't exist or access is denied
        ValueError: If spreadsheet_id is invalid
    """
    if not spreadsheet_id or len(spreadsheet_id) < 20:
        raise ValueError("Invalid spreadsheet ID format. Please provide a valid Google Sheets URL or ID.")
    try:
        return client.open_by_key(spreadsheet_id)
    except SpreadsheetNotFound as e:
        raise SpreadsheetNotFound(
            f"Spreadsheet '{spreadsheet_id}' not found or access denied. "
            "Please check the spreadsheet ID and ensure your service account "
            "has access to it."
        ) from e
    except NoValidUrlKeyFound as e:
        raise ValueError(
            f"Invalid spreadsheet ID: '{spreadsheet_id}'. "
            "Please provide a valid Google Sheets URL or ID."
        ) from e


# ===== Worksheet Operations =====

def read_worksheet_with_headers(
    spreadsheet: gspread.Spreadsheet,
    title: str,
    headers: List[str] = DECLARATION_HEADERS
) -> pd.DataFrame:
    """
    Read a worksheet into a DataFrame holding (at least) the given headers.

    Raises:
        WorksheetNotFound: If worksheet doesn't exist
    """
    try:
        worksheet = spreadsheet.worksheet(title)
    except WorksheetNotFound as e:
        raise WorksheetNotFound(f"Worksheet '{title}' not found in the spreadsheet.") from e

    values = worksheet.get_all_values()
    if not values:
        return pd.DataFrame(columns=headers)

    header = [normalize_text(c) for c in values[0]]
    df = pd.DataFrame(values[1:], columns=header)
    for c in headers:
        if c not in df.columns:
            df[c] = ""
    df = df[headers]
    for c in headers:
        df[c] = df[c].map(normalize_text)
    return df


def write_dataframe(spreadsheet: gspread.Spreadsheet, title: str, df: pd.DataFrame) -> None:
    """
    Overwrite a worksheet with a DataFrame, creating the worksheet if needed.

    Raises:
        APIError: If unable to write data
    """
    try:
        worksheet = spreadsheet.worksheet(title)
        worksheet.clear()
    except WorksheetNotFound:
        worksheet = spreadsheet.add_worksheet(
            title=title, rows=max(len(df) + 1, 100), cols=max(len(df.columns), 8)
        )
    try:
        if not df.empty:
            set_with_dataframe(worksheet, df, include_index=False, include_column_header=True)
    except APIError as e:
        raise APIError(
            f"Unable to write to worksheet '{title}'. Please check your permissions for this spreadsheet."
        ) from e


# ===== High-Level Sheet Operations =====

def read_google_sheet_declaration(spreadsheet_id: str, sheet_name: str, secrets_dict: dict) -> Declaration:
    """
    Read a Google Sheet tab (ID / Name / Children / Root) into a Declaration.

    Errors are propagated so the caller can show them to the user.
    """
    client = get_gspread_client_from_secrets(secrets_dict)
    spreadsheet = open_spreadsheet(client, spreadsheet_id)
    df = read_worksheet_with_headers(spreadsheet, sheet_name)
    return declaration_from_dataframe(df, source=f"sheets:{sheet_name}")


def push_tree_to_google_sheets(
    spreadsheet_id: str,
    sheet_name: str,
    tree: DecisionTree,
    secrets_dict: dict
) -> int:
    """
    Export a built tree to a Google Sheet tab. Returns the number of rows written.
    """
    client = get_gspread_client_from_secrets(secrets_dict)
    spreadsheet = open_spreadsheet(client, spreadsheet_id)
    df = tree_to_dataframe(tree).astype(str)
    write_dataframe(spreadsheet, sheet_name, df)
    return len(df)
