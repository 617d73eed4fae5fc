"""
Full Name Test Suite

This module contains end-to-end parsing tests:
- First, middle and last names in "First Last" and "Last, First" order
- Surname particles and compound surnames
- Nicknames in quotes and brackets
- Known and unknown suffixes, titles, and title/suffix mixes
- Automatic case repair
"""

import pytest

from nameparts import parse_full_name

# (input, (title, first, middle, last, nick, suffix), errors)
FULL_NAME_TEST_CASES = [
    # First and last names
    ("David Davis", ("", "David", "", "Davis", "", ""), []),
    ("Davis, David", ("", "David", "", "Davis", "", ""), []),
    ("Gerald Böck", ("", "Gerald", "", "Böck", "", ""), []),
    ("Böck, Gerald", ("", "Gerald", "", "Böck", "", ""), []),
    # Middle names
    ("David William Davis", ("", "David", "William", "Davis", "", ""), []),
    ("Davis, David William", ("", "David", "William", "Davis", "", ""), []),
    # Last names with particles
    ("Vincent Van Gogh", ("", "Vincent", "", "Van Gogh", "", ""), []),
    ("Van Gogh, Vincent", ("", "Vincent", "", "Van Gogh", "", ""), []),
    ("Lorenzo de Médici", ("", "Lorenzo", "", "de Médici", "", ""), []),
    ("de Médici, Lorenzo", ("", "Lorenzo", "", "de Médici", "", ""), []),
    ("Jüan de la Véña", ("", "Jüan", "", "de la Véña", "", ""), []),
    ("de la Véña, Jüan", ("", "Jüan", "", "de la Véña", "", ""), []),
    # Compound last names
    ("Jüan Martinez de Lorenzo y Gutierez", ("", "Jüan", "Martinez", "de Lorenzo y Gutierez", "", ""), []),
    ("de Lorenzo y Gutierez, Jüan Martinez", ("", "Jüan", "Martinez", "de Lorenzo y Gutierez", "", ""), []),
    # Nicknames
    ('Orenthal James "O. J." Simpson', ("", "Orenthal", "James", "Simpson", "O. J.", ""), []),
    ("Orenthal 'O. J.' James Simpson", ("", "Orenthal", "James", "Simpson", "O. J.", ""), []),
    ("(O. J.) Orenthal James Simpson", ("", "Orenthal", "James", "Simpson", "O. J.", ""), []),
    ("Simpson, Orenthal James “O. J.”", ("", "Orenthal", "James", "Simpson", "O. J.", ""), []),
    ("Simpson, Orenthal ‘O. J.’ James", ("", "Orenthal", "James", "Simpson", "O. J.", ""), []),
    ("Simpson, [O. J.] Orenthal James", ("", "Orenthal", "James", "Simpson", "O. J.", ""), []),
    (
        "Strippoli, Charles J (HM Home and Community Svcs LLC)",
        ("", "Charles", "J", "Strippoli", "HM Home and Community Svcs LLC", ""),
        [],
    ),
    ('James "O. J." Simpson', ("", "James", "", "Simpson", "O. J.", ""), []),
    ("Orenthal (O. J.), Simpson", ("", "Orenthal", "", "Simpson", "O. J.", ""), []),
    # Known suffixes
    ("Sammy Davis, Jr.", ("", "Sammy", "", "Davis", "", "Jr."), []),
    ("Davis, Sammy, Jr.", ("", "Sammy", "", "Davis", "", "Jr."), []),
    ("Dr. Dr.med.dent. Hans Zimmer", ("Dr.", "Hans", "", "Zimmer", "", "Dr.med.dent."), []),
    ("John Smith Jr.", ("", "John", "", "Smith", "", "Jr."), []),
    # Unknown suffixes after commas
    ("John P. Doe-Ray, Jr., LUTC", ("", "John", "P.", "Doe-Ray", "", "Jr., LUTC"), []),
    ("Doe-Ray, John P., Jr., LUTC", ("", "John", "P.", "Doe-Ray", "", "Jr., LUTC"), []),
    # Titles
    ("Dr. John P. Doe-Ray, Jr.", ("Dr.", "John", "P.", "Doe-Ray", "", "Jr."), []),
    ("Dr. Doe-Ray, John P., Jr.", ("Dr.", "John", "P.", "Doe-Ray", "", "Jr."), []),
    ("Doe-Ray, Dr. John P., Jr.", ("Dr.", "John", "P.", "Doe-Ray", "", "Jr."), []),
    # Leading, trailing and repeated whitespace
    (" Dr. John  P. Doe-Ray,  Jr.", ("Dr.", "John", "P.", "Doe-Ray", "", "Jr."), []),
    ("Dr.  Doe-Ray,  John  P.,   Jr. ", ("Dr.", "John", "P.", "Doe-Ray", "", "Jr."), []),
    (" Doe-Ray,  Dr.  John P. , Jr.  ", ("Dr.", "John", "P.", "Doe-Ray", "", "Jr."), []),
    ("Ezekiel Johnson ", ("", "Ezekiel", "", "Johnson", "", ""), []),
    ("  Ezekiel Johnson", ("", "Ezekiel", "", "Johnson", "", ""), []),
    # Words that can be a title or a suffix
    ("john smith dr.", ("Dr.", "John", "", "Smith", "", ""), []),
    ("Frau Dr. Sophie Wagner", ("Frau", "Sophie", "", "Wagner", "", "Dr."), []),
    ("Mr. Prof. John Doe", ("Mr.", "John", "", "Doe", "", "Prof."), []),
    ("Dr. Prof. John Doe", ("Dr.", "John", "", "Doe", "", "Prof."), []),
    ("Doctor Professor John Doe", ("Doctor", "John", "", "Doe", "", "Professor"), []),
    ("Dr. Prof. John Albert Doe", ("Dr.", "John", "Albert", "Doe", "", "Prof."), []),
    ("Dr. Dr. John Albert Doe", ("Dr.", "John", "Albert", "Doe", "", "Dr."), []),
    # Name parts in many different orders
    (
        "Mr. Jüan Martinez (Martin) de Lorenzo y Gutierez Jr.",
        ("Mr.", "Jüan", "Martinez", "de Lorenzo y Gutierez", "Martin", "Jr."),
        [],
    ),
    (
        "de Lorenzo y Gutierez, Mr. Jüan Martinez (Martin) Jr.",
        ("Mr.", "Jüan", "Martinez", "de Lorenzo y Gutierez", "Martin", "Jr."),
        [],
    ),
    (
        "de Lorenzo y Gutierez, Mr. Jüan (Martin) Martinez Jr.",
        ("Mr.", "Jüan", "Martinez", "de Lorenzo y Gutierez", "Martin", "Jr."),
        [],
    ),
    (
        "Mr. de Lorenzo y Gutierez, Jüan Martinez (Martin) Jr.",
        ("Mr.", "Jüan", "Martinez", "de Lorenzo y Gutierez", "Martin", "Jr."),
        [],
    ),
    (
        "Mr. de Lorenzo y Gutierez Jr., Jüan Martinez (Martin)",
        ("Mr.", "Jüan", "Martinez", "de Lorenzo y Gutierez", "Martin", "Jr."),
        [],
    ),
    (
        "Mr. de Lorenzo y Gutierez Jr., Jüan (Martin) Martinez",
        ("Mr.", "Jüan", "Martinez", "de Lorenzo y Gutierez", "Martin", "Jr."),
        [],
    ),
    (
        "Mr. de Lorenzo y Gutierez, Jr. Jüan Martinez (Martin)",
        ("Mr.", "Jüan", "Martinez", "de Lorenzo y Gutierez", "Martin", "Jr."),
        [],
    ),
    (
        "Mr. de Lorenzo y Gutierez, Jr. Jüan (Martin) Martinez",
        ("Mr.", "Jüan", "Martinez", "de Lorenzo y Gutierez", "Martin", "Jr."),
        [],
    ),
    # Automatic case repair for ALL CAPS and all lower case
    (
        "MR. JÜAN MARTINEZ (MARTIN) DE LORENZO Y GUTIEREZ JR.",
        ("Mr.", "Jüan", "Martinez", "de Lorenzo y Gutierez", "Martin", "Jr."),
        [],
    ),
    (
        "mr. jüan martinez (martin) de lorenzo y gutierez jr.",
        ("Mr.", "Jüan", "Martinez", "de Lorenzo y Gutierez", "Martin", "Jr."),
        [],
    ),
    ("mary-jane o'connor", ("", "Mary-jane", "", "O'connor", "", ""), []),
    ("JOHN DOE-RAY", ("", "John", "", "Doe-ray", "", ""), []),
    ("ryan o'neal", ("", "Ryan", "", "O'neal", "", ""), []),
    # Mixed case is left alone
    (
        "Mr. JÜAN MARTINEZ (MARTIN) DE LORENZO Y GUTIEREZ Jr.",
        ("Mr.", "JÜAN", "MARTINEZ", "DE LORENZO Y GUTIEREZ", "MARTIN", "Jr."),
        [],
    ),
    # Diagnostics
    ("Smith, John, Paul Peter", ("", "John", "Paul Peter", "Smith", "", ""), ["Error: 1 extra commas found"]),
    ("Smith, John, Paul, Peter", ("", "John", "", "Smith", "", "Paul, Peter"), []),
    ("John 'Jack' Paul (JJ) Smith", ("", "John", "Paul", "Smith", "Jack, JJ", ""), ["Error: 2 nicknames found"]),
    ("Mr. Sir John Smith", ("Mr., Sir", "John", "", "Smith", "", ""), ["Error: 2 titles found"]),
    ("John Smith Jr. Esq.", ("", "John", "", "Smith", "", "Jr., Esq."), ["Error: 2 suffixes found"]),
    (
        "John Paul George Ringo Starr",
        ("", "John", "Paul George Ringo", "Starr", "", ""),
        ["Error: 3 middle names"],
    ),
    (
        "as;dfkj ;aerha;sfa ef;oia;woeig hz;sofi hz;oifj;zoseifj zs;eofij z;soeif jzs;oefi jz;osif z;osefij zs;oif "
        "jz;soefihz;sodifh z;sofu hzsieufh zlsiudfh zksefiulzseofih ;zosufh ;oseihgfz;osef h:OSfih "
        "lziusefhaowieufyg oaweifugy",
        (
            "",
            "as;dfkj",
            ";aerha;sfa ef;oia;woeig hz;sofi hz;oifj;zoseifj zs;eofij z;soeif jzs;oefi jz;osif z;osefij zs;oif "
            "jz;soefihz;sodifh z;sofu hzsieufh zlsiudfh zksefiulzseofih ;zosufh ;oseihgfz;osef h:OSfih "
            "lziusefhaowieufyg",
            "oaweifugy",
            "",
            "",
        ),
        ["Error: 19 middle names"],
    ),
]


@pytest.mark.parametrize(("raw_name", "expected_parts", "expected_errors"), FULL_NAME_TEST_CASES)
def test_full_names(raw_name, expected_parts, expected_errors):
    parsed = parse_full_name(raw_name)
    assert parsed.as_tuple() == expected_parts
    assert parsed.error == expected_errors


def test_first_last_pairs_have_no_extras():
    for raw_name in ("David Davis", "Gerald Böck", "Ezekiel Johnson", "Mary Shelley"):
        parsed = parse_full_name(raw_name)
        assert (parsed.title, parsed.middle, parsed.nick, parsed.suffix) == ("", "", "", "")
        assert parsed.first
        assert parsed.last
        assert parsed.error == []


def test_comma_form_matches_space_form():
    pairs = [
        ("Davis, David", "David Davis"),
        ("Van Gogh, Vincent", "Vincent Van Gogh"),
        ("de la Véña, Jüan", "Jüan de la Véña"),
        ("Doe-Ray, John P.", "John P. Doe-Ray"),
    ]
    for comma_form, space_form in pairs:
        assert parse_full_name(comma_form).as_tuple() == parse_full_name(space_form).as_tuple()


def test_no_input():
    for raw_name in (None, "", 42, ["John", "Smith"]):
        parsed = parse_full_name(raw_name)
        assert parsed.as_tuple() == ("", "", "", "", "", "")
        assert parsed.error == ["Error: No input"]


def test_whitespace_only_input_has_no_parts():
    parsed = parse_full_name("   ")
    assert parsed.as_tuple() == ("", "", "", "", "", "")
    assert parsed.error == []


def test_nickname_only_input():
    parsed = parse_full_name('"Ace"')
    assert parsed.nick == "Ace"
    assert (parsed.first, parsed.last) == ("", "")


def test_title_only_input():
    parsed = parse_full_name("Dr.")
    assert parsed.title == "Dr."
    assert (parsed.first, parsed.last) == ("", "")
