from enum import Enum


class Genre(str, Enum):
    NONE = "NONE"
    FANTASY = "FANTASY"
    DYSTOPIAN = "DYSTOPIAN"
    FICTION = "FICTION"
    ROMANCE = "ROMANCE"
    HORROR = "HORROR"
    MYSTERY = "MYSTERY"
    ADVENTURE = "ADVENTURE"
    SATIRE = "SATIRE"
    WAR = "WAR"
    TRAGEDY = "TRAGEDY"
