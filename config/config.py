"""Shared defaults; the environment modules import and override these."""
import os

# HTTP
HOST = os.environ.get("HOST", "127.0.0.1")
PORT = int(os.environ.get("PORT", "5000"))

# Registrations workbook (relative paths resolve from the project root)
ROSTER_PATH = os.environ.get("ROSTER_PATH", "All_registrations.xlsx")

# Attendance log (Google Sheets)
SPREADSHEET_ID = os.environ.get("SPREADSHEET_ID", "1T4SgPawsMWdUkD22SvGbOKUsPQTiQOsBockfhfg9TOU")
LOG_WORKSHEET = os.environ.get("LOG_WORKSHEET", "Sheet1")
DIAGNOSTIC_RANGE = os.environ.get("DIAGNOSTIC_RANGE", "Attendance-Sheet!A1:D1")
LOG_POLICY = os.environ.get("LOG_POLICY", "action_tag")
SEED_FROM_LOG = bool(int(os.environ.get("SEED_FROM_LOG", "1")))

# Credentials: inline JSON wins over the key file
GOOGLE_APPLICATION_CREDENTIALS_JSON = os.environ.get("GOOGLE_APPLICATION_CREDENTIALS_JSON")
GOOGLE_CREDENTIALS_FILE = os.environ.get("GOOGLE_CREDENTIALS_FILE")

EXPORT_FILENAME = os.environ.get("EXPORT_FILENAME", "Attendance.xlsx")
PORTAL_TITLE = os.environ.get("PORTAL_TITLE", "PROCOM '25 Attendance Portal")
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
