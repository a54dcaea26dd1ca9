import json

import pytest

from drachenstudio.drachenflug import Drachenflug


def test_erstellen_vergibt_fortlaufende_nummern():
    start = Drachenflug.naechste_nummer()
    erster = Drachenflug.erstellen("Berk", 120)
    zweiter = Drachenflug.erstellen("Drachenklippe", 80)
    assert erster.flug_nummer == start
    assert zweiter.flug_nummer == start + 1
    assert Drachenflug.naechste_nummer() == start + 2


def test_erstellen_setzt_felder():
    flug = Drachenflug.erstellen("Berk", 120)
    assert flug.ziel == "Berk"
    assert flug.entfernung == 120.0
    assert flug.ladung == 0.0
    assert flug.passagiere == []


def test_startnummer_mindestens_zehntausend():
    assert Drachenflug.naechste_nummer() >= 10000


def test_from_json_hebt_zaehler_an():
    start = Drachenflug.naechste_nummer()
    daten = {
        "flugNummer": start + 100,
        "ziel": "Insel",
        "entfernung": 42.5,
        "ladung": 3.0,
        "passagiere": ["Hicks", "Astrid"],
    }
    flug = Drachenflug.from_json(daten)
    assert flug.flug_nummer == start + 100
    assert Drachenflug.naechste_nummer() == start + 101


def test_from_json_kleine_nummer_zaehlt_trotzdem_weiter():
    start = Drachenflug.naechste_nummer()
    daten = {"flugNummer": 1, "ziel": "X", "entfernung": 1, "ladung": 0, "passagiere": []}
    Drachenflug.from_json(daten)
    assert Drachenflug.naechste_nummer() == start + 1


def test_json_rundreise():
    flug = Drachenflug.erstellen("Berk", 120)
    flug.add_passagier("Hicks")
    flug.add_passagier("Fischbein")
    wieder = Drachenflug.from_json(json.loads(json.dumps(flug.to_json())))
    assert wieder == flug


def test_to_json_schluessel():
    flug = Drachenflug.erstellen("Berk", 120)
    assert set(flug.to_json()) == {"flugNummer", "ziel", "entfernung", "ladung", "passagiere"}


def test_from_json_fehlender_schluessel():
    with pytest.raises(KeyError):
        Drachenflug.from_json({"flugNummer": 5, "ziel": "X"})


def test_add_passagier_reihenfolge():
    flug = Drachenflug.erstellen("Berk", 10)
    flug.add_passagier("Rotzbakke")
    flug.add_passagier("Taffnuss")
    assert flug.passagiere == ["Rotzbakke", "Taffnuss"]


def test_reisedauer_ist_null():
    assert Drachenflug.erstellen("Berk", 500).reisedauer() == 0


def test_flug_daten_text():
    flug = Drachenflug(flug_nummer=10000, ziel="Berk", entfernung=120.0, passagiere=["Hicks"])
    text = flug.flug_daten()
    assert text.startswith("[Drachenflug]\n\nFlugnummer: 10000\nZiel: Berk\n")
    assert "Entfernung: 120\n" in text
    assert "\n[Passagiere]\nName des Passagiers: Hicks\n" in text
    assert text.endswith("\n\n")