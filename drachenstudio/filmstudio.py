"""The film studio: its dragons, JSON storage and the interactive menu."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, TextIO

from .drache import Drache, FlugNichtGefunden
from .drachenart import UnbekannteDrachenart, drache_aus_json, neuer_drache
from .drachenflug import Drachenflug

STANDARD_DATEI = "filmstudio.json"
_TRENNLINIE = "-" * 66
_ART_BUCHSTABEN = frozenset("abcd")


@dataclass
class Filmstudio:
    """A collection of dragons that can be stored to and loaded from JSON."""

    drachen_liste: list[Drache] = field(default_factory=list)

    @classmethod
    def laden(cls, filename: str | Path) -> Filmstudio:
        """Load a studio from a JSON file; a missing file gives an empty studio.

        Entries of an unknown species are reported on stderr and skipped.
        """
        try:
            with open(filename, encoding="utf-8") as datei:
                daten = json.load(datei)
        except FileNotFoundError:
            print(
                f"Konnte Datei {filename} nicht öffnen. Leere Liste wird verwendet.",
                file=sys.stderr,
            )
            return cls()

        studio = cls()
        for eintrag in daten or []:
            try:
                studio.drachen_liste.append(drache_aus_json(eintrag))
            except UnbekannteDrachenart as fehler:
                print(
                    f"Unbekannte Drachenart: {fehler.art} – Drache wird übersprungen.",
                    file=sys.stderr,
                )
        print(f"Daten wurden erfolgreich geladen aus {filename}")
        return studio

    def speichern(self, filename: str | Path) -> None:
        """Write all dragons to a JSON file; an empty studio is stored as null."""
        daten: list[dict[str, Any]] | None = [d.to_json() for d in self.drachen_liste] or None
        text = json.dumps(daten, indent=4, sort_keys=True, ensure_ascii=False)
        with open(filename, "w", encoding="utf-8") as datei:
            datei.write(text + "\n")

    def drache_hinzufuegen(self, drache: Drache) -> Drache:
        """Add a dragon to the studio and return it."""
        self.drachen_liste.append(drache)
        return drache

    def suche_drache(self, name: str) -> Drache | None:
        """Return the first dragon with the given name, or None."""
        return next((d for d in self.drachen_liste if d.drachen_name == name), None)

    def anzeigen(self) -> str:
        """Return the printable listing of all dragons."""
        if not self.drachen_liste:
            return "Drachenliste ist noch leer\n"
        return "".join(f"{d.anzeige()}{_TRENNLINIE}\n" for d in self.drachen_liste)


class _Eingabe:
    """Reads characters, words and lines from a text stream, line by line."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._puffer = ""

    def _fuellen(self) -> bool:
        zeile = self._stream.readline()
        if not zeile:
            return False
        self._puffer += zeile
        return True

    def _leerraum_ueberspringen(self) -> None:
        while True:
            self._puffer = self._puffer.lstrip()
            if self._puffer:
                return
            if not self._fuellen():
                raise EOFError

    def zeichen(self) -> str:
        """Return the next character that is not whitespace."""
        self._leerraum_ueberspringen()
        ch, self._puffer = self._puffer[0], self._puffer[1:]
        return ch

    def wort(self) -> str:
        """Return the next whitespace-delimited word."""
        self._leerraum_ueberspringen()
        teile = self._puffer.split(maxsplit=1)
        wort = teile[0]
        self._puffer = self._puffer[self._puffer.index(wort) + len(wort):]
        return wort

    def zeile(self) -> str:
        """Return the rest of the current line without its line break."""
        while "\n" not in self._puffer:
            if not self._fuellen():
                if not self._puffer:
                    raise EOFError
                zeile, self._puffer = self._puffer, ""
                return zeile
        zeile, _, self._puffer = self._puffer.partition("\n")
        return zeile

    def ignorieren(self) -> None:
        """Discard everything up to and including the next line break."""
        while "\n" not in self._puffer:
            if not self._fuellen():
                self._puffer = ""
                return
        self._puffer = self._puffer.partition("\n")[2]


def _drachenart_waehlen(eingabe: _Eingabe, ausgabe: TextIO) -> str:
    while True:
        print("Drachenart?", file=ausgabe)
        print("a: Nachtschatten", file=ausgabe)
        print("b: Tagschatten", file=ausgabe)
        print("c: ToedlicherNadder", file=ausgabe)
        print("d: Skrill", file=ausgabe)
        buchstabe = eingabe.zeichen()
        if buchstabe.lower() in _ART_BUCHSTABEN:
            return buchstabe
        print("Ungueltige Eingabe, bitte erneut eingeben", file=ausgabe)


def _drache_anlegen(studio: Filmstudio, eingabe: _Eingabe, ausgabe: TextIO) -> None:
    buchstabe = _drachenart_waehlen(eingabe, ausgabe)
    ausgabe.write("Name des Drachen: ")
    eingabe.ignorieren()
    name = eingabe.zeile()
    ausgabe.write("Mein Player: ")
    player = eingabe.zeile()
    print(f"\n\nName des Drachen: {name} \nMein Player: {player}", file=ausgabe)
    studio.drache_hinzufuegen(neuer_drache(buchstabe, name, player))


def _drache_suchen(studio: Filmstudio, eingabe: _Eingabe, ausgabe: TextIO) -> Drache | None:
    ausgabe.write("Name des zu suchenden Drachen eingeben: ")
    name = eingabe.zeile()
    drache = studio.suche_drache(name)
    if drache is None:
        print(f"Der Drache mit dem Namen {name} konnte nicht gefunden werden.", file=ausgabe)
    return drache


def _flug_anlegen(drache: Drache, eingabe: _Eingabe, ausgabe: TextIO) -> None:
    ausgabe.write("Ziel? ")
    ziel = eingabe.zeile()
    ausgabe.write("Entfernung der Reise angeben: ")
    try:
        entfernung = float(eingabe.wort())
    except ValueError:
        print("Ungueltige Eingabe", file=ausgabe)
        return
    drache.drachenflug_hinzufuegen(Drachenflug.erstellen(ziel, entfernung))
    print("Die Drachenreise wurde erfolgreich erstellt.", file=ausgabe)


def _passagier_anlegen(drache: Drache, eingabe: _Eingabe, ausgabe: TextIO) -> None:
    ausgabe.write("Flugnummer eingeben: ")
    try:
        flugnummer = int(eingabe.wort())
        flug = drache.finde_flug(flugnummer)
    except (ValueError, FlugNichtGefunden):
        print("Drachenflug existiert nicht.", file=ausgabe)
        return
    ausgabe.write("Name des Passagiers eingeben: ")
    name = eingabe.wort()
    flug.add_passagier(name)
    print(f"Passagier mit dem Namen {name} wurde zum Flug hinzugefuegt.", file=ausgabe)


def _menue(ausgabe: TextIO) -> None:
    print(file=ausgabe)
    print("1: Drache hinzufuegen", file=ausgabe)
    print("2: Drachenflug hinzufuegen", file=ausgabe)
    print("3: Passagier buchen", file=ausgabe)
    print("4: Alle Drachen anzeigen", file=ausgabe)
    print("5: Speichern als JSON", file=ausgabe)
    print("0: Programm beenden", file=ausgabe)


def dialog(
    studio: Filmstudio,
    eingabe: TextIO | None = None,
    ausgabe: TextIO | None = None,
    filename: str | Path = STANDARD_DATEI,
) -> None:
    """Run the interactive menu until '0' is chosen or the input ends."""
    quelle = _Eingabe(eingabe if eingabe is not None else sys.stdin)
    ziel = ausgabe if ausgabe is not None else sys.stdout
    try:
        while True:
            _menue(ziel)
            wahl = quelle.zeichen()
            quelle.ignorieren()
            if wahl == "0":
                return
            if wahl == "1":
                _drache_anlegen(studio, quelle, ziel)
            elif wahl == "2":
                drache = _drache_suchen(studio, quelle, ziel)
                if drache is not None:
                    _flug_anlegen(drache, quelle, ziel)
            elif wahl == "3":
                drache = _drache_suchen(studio, quelle, ziel)
                if drache is not None:
                    _passagier_anlegen(drache, quelle, ziel)
            elif wahl == "4":
                ziel.write(studio.anzeigen())
            elif wahl == "5":
                try:
                    studio.speichern(filename)
                except OSError:
                    print("JSON Datei konnte nicht geoeffnet werden.", file=sys.stderr)
                else:
                    print("Der aktuelle Stand wurde gespeichert.", file=ziel)
            else:
                print("Ungueltige Eingabe", file=ziel)
    except EOFError:
        return


def main(argv: list[str] | None = None) -> int:
    """Load the studio, run the menu and say goodbye."""
    parser = argparse.ArgumentParser(description="Drachen und Drachenfluege verwalten.")
    parser.add_argument("datei", nargs="?", default=STANDARD_DATEI, help="JSON-Datei des Filmstudios")
    args = parser.parse_args(argv)

    studio = Filmstudio.laden(args.datei)
    dialog(studio, sys.stdin, sys.stdout, args.datei)
    print("Eywa hat dich erhoert!")
    return 0