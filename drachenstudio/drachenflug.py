"""Dragon flights: destination, distance, cargo and booked passengers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar


def _zahl(wert: float) -> str:
    """Format a number the way a default stream output would."""
    return f"{wert:g}"


@dataclass
class Drachenflug:
    """A single flight offered by a dragon."""

    flug_nummer: int
    ziel: str
    entfernung: float
    ladung: float = 0.0
    passagiere: list[str] = field(default_factory=list)

    _naechste: ClassVar[int] = 10000

    @classmethod
    def naechste_nummer(cls) -> int:
        """Return the number the next newly created flight will receive."""
        return Drachenflug._naechste

    @classmethod
    def erstellen(cls, ziel: str, entfernung: float) -> Drachenflug:
        """Create a new flight with the next free flight number."""
        nummer = Drachenflug._naechste
        Drachenflug._naechste += 1
        return cls(flug_nummer=nummer, ziel=ziel, entfernung=float(entfernung))

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Drachenflug:
        """Build a flight from its JSON form and advance the number counter."""
        nummer = int(data["flugNummer"])
        if nummer > Drachenflug._naechste:
            Drachenflug._naechste = nummer
        Drachenflug._naechste += 1
        return cls(
            flug_nummer=nummer,
            ziel=data["ziel"],
            entfernung=float(data["entfernung"]),
            ladung=float(data["ladung"]),
            passagiere=[str(p) for p in data["passagiere"]],
        )

    def to_json(self) -> dict[str, Any]:
        """Return the JSON form of this flight."""
        return {
            "flugNummer": self.flug_nummer,
            "ziel": self.ziel,
            "entfernung": self.entfernung,
            "ladung": self.ladung,
            "passagiere": list(self.passagiere),
        }

    def add_passagier(self, name: str) -> None:
        """Book a passenger onto this flight."""
        self.passagiere.append(name)

    def reisedauer(self) -> float:
        """Travel time of the flight; not yet computed, always zero."""
        return 0.0

    def flug_daten(self) -> str:
        """Return the printable description of the flight and its passengers."""
        zeilen = [
            "[Drachenflug]\n\n",
            f"Flugnummer: {self.flug_nummer}\n",
            f"Ziel: {self.ziel}\n",
            f"Entfernung: {_zahl(self.entfernung)}\n",
            f"Ladung: {_zahl(self.ladung)}\n",
            "\n[Passagiere]\n",
        ]
        zeilen.extend(f"Name des Passagiers: {p}\n" for p in self.passagiere)
        zeilen.append("\n")
        return "".join(zeilen)