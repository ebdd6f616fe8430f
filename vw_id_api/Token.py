import datetime as dt
from dataclasses import dataclass


@dataclass
class Token:
    username: str = None
    access_token: str = None
    refresh_token: str = None
    valid_until: dt.datetime = dt.datetime.min
