"""Dragons that carry flights for the film studio."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any

from .drachenflug import Drachenflug, _zahl


class FlugNichtGefunden(LookupError):
    """Raised when a dragon has no flight with the requested number."""

    def __init__(self, flugnummer: int) -> None:
        super().__init__(f"Drachenflug {flugnummer} existiert nicht.")
        self.flugnummer = flugnummer


@dataclass
class Drache:
    """A dragon with its owner, travel values, price and flights."""

    drachen_name: str
    mein_player: str
    geschwindigkeit: float = 0.0
    ausdauer: float = 0.0
    erholung: float = 0.0
    drachen_preis: float = 0.0
    drachenflug_liste: list[Drachenflug] = field(default_factory=list)
    drachen_art: str = ""

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Drache:
        """Build a dragon and its flights from the JSON form."""
        kwargs: dict[str, Any] = {
            "drachen_name": data["drachenName"],
            "mein_player": data["meinPlayer"],
            "geschwindigkeit": float(data["geschwindigkeit"]),
            "ausdauer": float(data["ausdauer"]),
            "erholung": float(data["erholung"]),
            "drachen_preis": float(data["drachenPreis"]),
            "drachenflug_liste": [
                Drachenflug.from_json(f) for f in data.get("drachenflugListe") or []
            ],
        }
        if any(f.name == "drachen_art" and f.init for f in fields(cls)):
            kwargs["drachen_art"] = data["drachenArt"]
        return cls(**kwargs)

    def to_json(self) -> dict[str, Any]:
        """Return the JSON form; the flight list is present only when not empty."""
        data: dict[str, Any] = {
            "drachenName": self.drachen_name,
            "meinPlayer": self.mein_player,
            "geschwindigkeit": self.geschwindigkeit,
            "ausdauer": self.ausdauer,
            "erholung": self.erholung,
            "drachenPreis": self.drachen_preis,
            "drachenArt": self.drachen_art,
        }
        if self.drachenflug_liste:
            data["drachenflugListe"] = [f.to_json() for f in self.drachenflug_liste]
        return data

    def drachenflug_hinzufuegen(self, flug: Drachenflug) -> Drachenflug:
        """Add a flight to this dragon and return it."""
        self.drachenflug_liste.append(flug)
        return flug

    def finde_flug(self, flugnummer: int) -> Drachenflug:
        """Return the flight with the given number or raise FlugNichtGefunden."""
        for flug in self.drachenflug_liste:
            if flug.flug_nummer == flugnummer:
                return flug
        raise FlugNichtGefunden(flugnummer)

    def passagier_buchen(self, flugnummer: int, name: str) -> Drachenflug:
        """Book a passenger onto the flight with the given number."""
        flug = self.finde_flug(flugnummer)
        flug.add_passagier(name)
        return flug

    def anzeige(self) -> str:
        """Return the printable description of the dragon and its flights."""
        kopf = (
            f"Drache {self.drachen_name} von {self.mein_player}:  "
            f"{_zahl(self.geschwindigkeit)} km/h, Ausdauer={_zahl(self.ausdauer)}, "
            f"Erholung={_zahl(self.erholung)}, Preis={_zahl(self.drachen_preis)}\n\n"
        )
        return kopf + "".join(f.flug_daten() for f in self.drachenflug_liste)