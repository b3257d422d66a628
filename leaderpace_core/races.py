"""Static race table: name -> timing page and total distance."""

from dataclasses import dataclass
from typing import Dict, Optional

from .errors import ValidationError

DEFAULT_TOTAL_KM = 40.0

EQTIMING_VASALOPPET = "https://live.eqtiming.com/76514"
EQTIMING_MORA25 = "https://live.eqtiming.com/73153"
EQTIMING_CRAFT = "https://live.eqtiming.com/73152"
SKICLASSICS_LA_DIAGONELA = "https://skiclassics.com/live-center/?event=9620&season=2026&gender=men"


@dataclass(frozen=True)
class RaceDefinition:
    name: str
    total_km: float
    source_url: Optional[str] = None

    @property
    def page_url(self) -> Optional[str]:
        """URL to render; eqtiming needs the #result view to show leader splits."""
        if not self.source_url:
            return None
        if "eqtiming" in self.source_url and "#" not in self.source_url:
            return f"{self.source_url}#result"
        return self.source_url


RACES: Dict[str, RaceDefinition] = {
    race.name: race
    for race in (
        RaceDefinition("vasaloppet", 90.0, EQTIMING_VASALOPPET),
        RaceDefinition("vasaloppet 90", 90.0, EQTIMING_VASALOPPET),
        RaceDefinition("moraloppet", 90.0, EQTIMING_VASALOPPET),
        RaceDefinition("mora", 90.0, EQTIMING_VASALOPPET),
        RaceDefinition("mora25", DEFAULT_TOTAL_KM, EQTIMING_MORA25),
        RaceDefinition("vasaloppet 45", 45.0),
        RaceDefinition("halvvasan", 45.0),
        RaceDefinition("vasaloppet 30", 30.0),
        RaceDefinition("vasaloppet 10", 10.0),
        RaceDefinition("ladiagonela", 47.0, SKICLASSICS_LA_DIAGONELA),
        RaceDefinition("craft", 42.0, EQTIMING_CRAFT),
        RaceDefinition("craft ski marathon", 42.0, EQTIMING_CRAFT),
        RaceDefinition("sya", 40.0),
        RaceDefinition("k-byggslingan", 40.0),
        RaceDefinition("test10k", 10.0),
        RaceDefinition("test20k", 20.0),
    )
}


def get_race(race_name: str) -> RaceDefinition:
    """Look up a race; unknown names get the default distance and no page."""
    key = (race_name or "").strip().lower()
    race = RACES.get(key)
    if race is None:
        return RaceDefinition(key, DEFAULT_TOTAL_KM)
    return race


def get_total_distance(race_name: str) -> float:
    return get_race(race_name).total_km


def get_race_url(race_name: str) -> str:
    url = get_race(race_name).page_url
    if not url:
        raise ValidationError(f"No race url defined for {race_name}")
    return url
