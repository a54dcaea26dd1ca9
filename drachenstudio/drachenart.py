"""The dragon species with their base values, and factories for them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .drache import Drache


class UnbekannteDrachenart(ValueError):
    """Raised for a dragon species that is not known."""

    def __init__(self, art: str) -> None:
        super().__init__(f"Unbekannte Drachenart: {art}")
        self.art = art


@dataclass
class Nachtschatten(Drache):
    """Night Fury."""

    geschwindigkeit: float = 160.0
    ausdauer: float = 4.5
    erholung: float = 1.75
    drachen_preis: float = 5100.0
    drachen_art: str = field(default="Nachtschatten", init=False)


@dataclass
class Tagschatten(Drache):
    """Light Fury."""

    geschwindigkeit: float = 170.0
    ausdauer: float = 6.75
    erholung: float = 2.25
    drachen_preis: float = 3500.0
    drachen_art: str = field(default="Tagschatten", init=False)


@dataclass
class ToedlicherNadder(Drache):
    """Deadly Nadder."""

    geschwindigkeit: float = 140.0
    ausdauer: float = 7.5
    erholung: float = 1.5
    drachen_preis: float = 3750.0
    drachen_art: str = field(default="ToedlicherNadder", init=False)


@dataclass
class Skrill(Drache):
    """Skrill."""

    geschwindigkeit: float = 190.0
    ausdauer: float = 5.25
    erholung: float = 3.5
    drachen_preis: float = 4200.0
    drachen_art: str = field(default="Skrill", init=False)


_ARTEN: dict[str, type[Drache]] = {
    "Nachtschatten": Nachtschatten,
    "Tagschatten": Tagschatten,
    "ToedlicherNadder": ToedlicherNadder,
    "Skrill": Skrill,
}

_AUSWAHL: dict[str, type[Drache]] = {
    "a": Nachtschatten,
    "b": Tagschatten,
    "c": ToedlicherNadder,
    "d": Skrill,
}


def neuer_drache(art: str, name: str, player: str) -> Drache:
    """Create a new dragon by menu letter (a-d, any case) or species name."""
    klasse = _AUSWAHL.get(art.lower()) if len(art) == 1 else _ARTEN.get(art)
    if klasse is None:
        raise UnbekannteDrachenart(art)
    return klasse(drachen_name=name, mein_player=player)


def drache_aus_json(data: dict[str, Any]) -> Drache:
    """Build a dragon of the species named in its JSON form."""
    art = data["drachenArt"]
    klasse = _ARTEN.get(art)
    if klasse is None:
        raise UnbekannteDrachenart(art)
    return klasse.from_json(data)