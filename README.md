# drachenstudio

A small console program for a film studio that keeps track of its dragons,
the flights each dragon makes and the passengers booked on them. The whole
state is kept in one JSON file, `filmstudio.json` in the current directory
unless another file is named.

## Installation

```
pip install .
```

## Use

```
drachenstudio [datei]
```

`datei` is the JSON file to load and save; it defaults to `filmstudio.json`.
If the file is missing, the program says so on stderr and starts with an
empty list. It then shows a menu, read from standard input:

```
1: Drache hinzufuegen
2: Drachenflug hinzufuegen
3: Passagier buchen
4: Alle Drachen anzeigen
5: Speichern als JSON
0: Programm beenden
```

- **1** asks for the kind (`a`–`d`, either case), the dragon's name and its player.
- **2** asks for a dragon by name, then a destination and a distance.
- **3** asks for a dragon by name, a flight number and a passenger name
  (one word).
- **4** lists every dragon with its flights and passengers.
- **5** writes the current state to the file.
- **0**, or the end of the input, ends the program.

There are four kinds of dragon. Each comes with its own values:

| Art              | km/h  | Ausdauer | Erholung | Preis  |
|------------------|-------|----------|----------|--------|
| Nachtschatten    | 160.0 | 4.5      | 1.75     | 5100.0 |
| Tagschatten      | 170.0 | 6.75     | 2.25     | 3500.0 |
| ToedlicherNadder | 140.0 | 7.5      | 1.5      | 3750.0 |
| Skrill           | 190.0 | 5.25     | 3.5      | 4200.0 |

Flight numbers begin at 10000 and go up by one with each new flight. When
flights are loaded from a file, numbering goes on after the highest number
that was stored.

## File format

The file holds a JSON list of dragons, written with an indent of four and
sorted keys. Each dragon has `drachenName`, `meinPlayer`, `geschwindigkeit`,
`ausdauer`, `erholung`, `drachenPreis`, `drachenArt` and, only if it has
flights, `drachenflugListe`. Each flight has `flugNummer`, `ziel`,
`entfernung`, `ladung` and `passagiere`. A studio without dragons is saved
as `null`. While a file is loading, dragons of an unknown kind are reported
on stderr and skipped.

## Use from Python

```python
from drachenstudio.drachenart import neuer_drache
from drachenstudio.drachenflug import Drachenflug
from drachenstudio.filmstudio import Filmstudio

studio = Filmstudio.laden("filmstudio.json")
ohnezahn = neuer_drache("Nachtschatten", "Ohnezahn", "Hicks")
studio.drache_hinzufuegen(ohnezahn)

flug = Drachenflug.erstellen("Berk", 120.0)
ohnezahn.drachenflug_hinzufuegen(flug)
ohnezahn.passagier_buchen(flug.flug_nummer, "Astrid")

print(studio.anzeigen())
studio.speichern("filmstudio.json")
```

- `neuer_drache(art, name, player)` takes a menu letter (`a`–`d`, any case) or
  a kind's name; `drache_aus_json(data)` builds a dragon from its JSON form.
  Both raise `UnbekannteDrachenart` for a kind they do not know.
- `Drache.finde_flug` and `Drache.passagier_buchen` raise `FlugNichtGefunden`
  if the dragon has no flight with that number.
- `Drache.anzeige()`, `Drachenflug.flug_daten()` and `Filmstudio.anzeigen()`
  return the printed text rather than printing it.
- `Filmstudio.suche_drache(name)` returns the first dragon of that name, or
  `None`.
- `dialog(studio, eingabe, ausgabe, filename)` runs the menu on any text
  streams.

## What it does not do

`Drachenflug.reisedauer()` always returns `0.0`; travel times are not
computed. Cargo (`ladung`) is stored and shown but cannot be set from the
menu. Dragons, flights and passengers cannot be removed or changed once
added.