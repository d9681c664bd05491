"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

# Registrations workbook
COMPETITION_COLUMN = "Competition Name"
TEAM_COLUMN = "Team Name"
LEADER_COLUMN = "Leader Name"
APPROVAL_COLUMN = "isApproved"
APPROVED_TOKEN = "approved"

# Google Sheets
SHEETS_SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]
REQUIRED_CREDENTIAL_FIELDS = ("client_email", "private_key", "token_uri")
DEFAULT_LOG_WORKSHEET = "Sheet1"
DEFAULT_DIAGNOSTIC_RANGE = "Attendance-Sheet!A1:D1"

# Row 1 of the log worksheet is the header.
LOG_FIRST_DATA_ROW = 2

# Export
EXPORT_SHEET_NAME = "Attendance"
EXPORT_COLUMNS = ["competition", "team", "leader", "present"]
XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
