import json

import pytest

from drachenstudio.drache import Drache, FlugNichtGefunden
from drachenstudio.drachenflug import Drachenflug


def _drache():
    return Drache(
        drachen_name="Ohnezahn",
        mein_player="Hicks",
        geschwindigkeit=160.0,
        ausdauer=4.5,
        erholung=1.75,
        drachen_preis=5100.0,
        drachen_art="Nachtschatten",
    )


def test_to_json_ohne_fluege_hat_keine_flugliste():
    data = _drache().to_json()
    assert "drachenflugListe" not in data
    assert data["drachenName"] == "Ohnezahn"
    assert data["drachenArt"] == "Nachtschatten"


def test_json_rundreise_mit_fluegen():
    drache = _drache()
    flug = drache.drachenflug_hinzufuegen(Drachenflug.erstellen("Berk", 120))
    flug.add_passagier("Astrid")
    wieder = Drache.from_json(json.loads(json.dumps(drache.to_json())))
    assert wieder == drache


def test_from_json_ohne_flugliste():
    data = _drache().to_json()
    wieder = Drache.from_json(data)
    assert wieder.drachenflug_liste == []
    assert wieder.drachen_art == "Nachtschatten"


def test_drachenflug_hinzufuegen_gibt_flug_zurueck():
    drache = _drache()
    flug = Drachenflug.erstellen("Berk", 50)
    assert drache.drachenflug_hinzufuegen(flug) is flug
    assert drache.drachenflug_liste == [flug]


def test_passagier_buchen():
    drache = _drache()
    flug = drache.drachenflug_hinzufuegen(Drachenflug.erstellen("Berk", 50))
    drache.passagier_buchen(flug.flug_nummer, "Fischbein")
    assert flug.passagiere == ["Fischbein"]


def test_passagier_buchen_unbekannter_flug():
    drache = _drache()
    with pytest.raises(FlugNichtGefunden) as info:
        drache.passagier_buchen(1, "Fischbein")
    assert info.value.flugnummer == 1


def test_finde_flug_ist_lookup_error():
    with pytest.raises(LookupError):
        _drache().finde_flug(12345)


def test_anzeige():
    drache = _drache()
    flug = drache.drachenflug_hinzufuegen(Drachenflug.erstellen("Berk", 50))
    text = drache.anzeige()
    assert text.startswith("Drache Ohnezahn von Hicks:  160 km/h, Ausdauer=4.5, Erholung=1.75, Preis=5100\n\n")
    assert text.endswith(flug.flug_daten())