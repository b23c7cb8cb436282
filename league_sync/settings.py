import os
from typing import Dict, List, Optional

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Published spreadsheet
BASE_SHEET_URL = os.getenv(
    "LEAGUE_SHEET_URL",
    "https://docs.google.com/spreadsheets/d/e/"
    "2PACX-1vQCVr58uMl14fyEjGGDIwv2syaW3k-UtAMvlrDtqTvdSP4BkXEHAYrhUzuGNV_FVavzTD9I9kW--y4C/pub",
)
MAPPING_GID = os.getenv("LEAGUE_MAPPING_GID", "26105431")
OVERALL_GID = "983198576"  # Overall standings sheet

# League Settings
TEAMS: List[str] = ["Maple Leafs", "Canadiens", "Bruins", "Red Wings"]
WEEKS: List[int] = list(range(1, 15))

# Used whenever the mapping sheet cannot be fetched
FALLBACK_SHEET_MAPPINGS: Dict[str, str] = {
    "overall": OVERALL_GID,
    "Maple Leafs": "826678550",
    "Canadiens": "544275637",
    "Bruins": "113883190",
    "Red Wings": "2058186730",
    "Week 1": "593743521",
    "Week 2": "1121402062",
    "Week 3": "1071304946",
    "Week 4": "1719310027",
    "Week 5": "1230431394",
    "Week 6": "2020067957",
    "Week 7": "1013285102",
    "Week 8": "1463206337",
    "Week 9": "1023309672",
    "Week 10": "692231056",
    "Week 11": "1541753318",
    "Week 12": "98340773",
    "Week 13": "68729982",
    "Week 14": "860267584",
}

# Application Settings
OUTPUT_DIR = os.getenv("LEAGUE_OUTPUT_DIR", os.path.join("static", "data"))
ROSTERS_FILENAME = "rosters.json"
SCHEDULE_FILENAME = "schedule.json"
JSON_INDENT = 4


def _optional_float(name: str) -> Optional[float]:
    configured = os.getenv(name)
    if not configured:
        return None
    try:
        return float(configured)
    except ValueError:
        return None


# None leaves requests without a timeout
REQUEST_TIMEOUT = _optional_float("LEAGUE_SYNC_TIMEOUT")
REFRESH_INTERVAL = int(os.getenv("LEAGUE_REFRESH_INTERVAL", "0") or 0)  # seconds, 0 disables


def week_sheet_name(week: int) -> str:
    return f"Week {week}"
