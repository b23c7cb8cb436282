"""Sheet exports and HTTP fakes shared by the tests."""
from __future__ import annotations

import re
from typing import Dict, List, Optional, Union

BASE_URL = "https://sheets.example.com/pub"

ROSTER_CSV = """Team Name,Maple Leafs,,
Coach,Pat Burns,,
Player #,Player Name,Goals,
12,John Smith,5
7,Mike Jones,2
30,Jane Doe (G),0
,,,,
Goalie Stats,,,
Week,Goals Allowed,Saves,
"""

WEEK_1_CSV = """Week,1,5/4/2025,
Game,Team 1,Team 2,Rink
1,Maple Leafs,Red Wings,North
2,Canadiens,Bruins,South
"""

MAPPING_CSV = """Sheets,GID
"Maple Leafs","826678550"
Week 1,593743521

Sheets,ignored
"Playoffs, Round 1",555
"""


class FakeResponse:
    def __init__(self, status_code: int = 200, text: str = ""):
        self.status_code = status_code
        self.text = text

    @property
    def ok(self) -> bool:
        return self.status_code < 400


class FakeSession:
    """Answers GETs by gid; a gid mapped to an exception raises it."""

    def __init__(self, responses: Optional[Dict[str, Union[FakeResponse, Exception]]] = None):
        self.responses = responses or {}
        self.calls: List[str] = []

    def get(self, url, timeout=None):
        self.calls.append(url)
        gid = re.search(r"gid=([^&]*)", url).group(1)
        answer = self.responses.get(gid, FakeResponse(404, ""))
        if isinstance(answer, Exception):
            raise answer
        return answer
