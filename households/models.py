# households/models.py

from dataclasses import dataclass, field, replace, fields
from datetime import date
from typing import Literal

MAX_MEMBERS = 5

Gender = Literal["male", "female", "prefernottosay"]
Race = Literal["white", "latino", "black", "asian", "other"]
Language = Literal["english", "spanish", "other"]
Relationship = Literal[
    "child", "grandchild", "spouse", "parent", "grandparent", "sibling", "friend", "other"
]


# -------------------------------------------------
# Select options: (value, translation key)
# -------------------------------------------------

GENDER_CHOICES = [
    ("male", "misc.male"),
    ("female", "misc.female"),
    ("prefernottosay", "misc.prefernottosay"),
]

RACE_CHOICES = [
    ("white", "misc.race.white"),
    ("latino", "misc.race.latino"),
    ("black", "misc.race.black"),
    ("asian", "misc.race.asian"),
    ("other", "misc.other"),
]

LANGUAGE_CHOICES = [
    ("english", "misc.english"),
    ("spanish", "misc.spanish"),
    ("other", "misc.other"),
]

RELATIONSHIP_CHOICES = [
    ("child", "misc.child"),
    ("grandchild", "misc.grandchild"),
    ("spouse", "misc.spouse"),
    ("parent", "misc.parent"),
    ("grandparent", "misc.grandparent"),
    ("sibling", "misc.sibling"),
    ("friend", "misc.friend"),
    ("other", "misc.other"),
]


def month_options():
    return [f"{m:02d}" for m in range(1, 13)]


def day_options():
    return [f"{d:02d}" for d in range(1, 32)]


def year_options(today: date | None = None, span: int = 100):
    year = (today or date.today()).year
    return [str(year - i) for i in range(span)]


@dataclass
class Person:
    """
    One person on the signup form, as typed.

    Values stay raw strings until the household is normalized for
    submission. Head-only and member-only fields simply stay empty on the
    other kind of person.
    """
    first_name: str = ""
    last_name: str = ""
    dob_month: str = ""         # "01".."12"
    dob_day: str = ""           # "01".."31"
    dob_year: str = ""          # "1990"
    gender: str = ""            # Gender
    race: str = ""              # Race

    # member only
    relationship: str = ""      # Relationship

    # head only
    language: str = ""          # Language
    email: str = ""
    phone: str = ""
    street: str = ""
    city: str = ""
    postal_code: str = ""

    @property
    def dob(self) -> str:
        """
        YYYY-MM-DD, or "" while any component is missing.
        """
        if not (self.dob_year and self.dob_month and self.dob_day):
            return ""
        return f"{self.dob_year}-{_pad(self.dob_month)}-{_pad(self.dob_day)}"

    def has_name(self) -> bool:
        return bool(self.first_name.strip()) and bool(self.last_name.strip())

    def normalized(self) -> "Person":
        return replace(self, **{
            f.name: getattr(self, f.name).strip() for f in fields(self)
        })

    def to_dict(self, head: bool = False) -> dict:
        data = {
            "firstName": self.first_name,
            "lastName": self.last_name,
            "dob": self.dob,
            "gender": self.gender,
            "race": self.race,
        }
        if head:
            data.update({
                "language": self.language,
                "email": self.email,
                "phone": self.phone,
                "street": self.street,
                "city": self.city,
                "postalCode": self.postal_code,
            })
        else:
            data["relationship"] = self.relationship
        return data


def _pad(value: str) -> str:
    return value.zfill(2) if value.isdigit() else value


# -------------------------------------------------
# Field dispatch: form/wire name -> Person attribute
# -------------------------------------------------

COMMON_FIELDS = {
    "firstName": "first_name",
    "lastName": "last_name",
    "dobMonth": "dob_month",
    "dobDay": "dob_day",
    "dobYear": "dob_year",
    "gender": "gender",
    "race": "race",
}

HEAD_FIELDS = {
    **COMMON_FIELDS,
    "language": "language",
    "email": "email",
    "phone": "phone",
    "street": "street",
    "city": "city",
    "postalCode": "postal_code",
}

MEMBER_FIELDS = {
    **COMMON_FIELDS,
    "relationship": "relationship",
}

REQUIRED_HEAD_FIELDS = ["firstName", "lastName", "dobMonth", "dobDay", "dobYear"]


@dataclass
class Member:
    """
    An additional household member. `id` is assigned by the signup form and
    never leaves the browser session.
    """
    id: int
    person: Person = field(default_factory=Person)


@dataclass
class Household:
    head: Person
    members: list[Person] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "head": self.head.to_dict(head=True),
            "members": [m.to_dict() for m in self.members],
        }
