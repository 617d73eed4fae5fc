# ═════════════════════════════════════════════════════════════════════════════════
# NAME VOCABULARIES
# ═════════════════════════════════════════════════════════════════════════════════
#
# Static word lists consumed by the parsing pipeline:
# 1. SUFFIXES: qualifiers that follow a name (generational, academic, professional)
# 2. TITLES: honorifics that precede a name (short and expanded lists)
# 3. PREFIXES: surname particles that stay attached to the following word
# 4. CONJUNCTIONS: joining words inside compound surnames
# 5. FORCE_CASE: words whose casing is fixed regardless of general casing rules
# 6. *_SYNONYMS: spellings mapped to one canonical abbreviation when normalizing
#
# Entries of SUFFIXES, TITLES, PREFIXES and CONJUNCTIONS must be lowercase.
# ═════════════════════════════════════════════════════════════════════════════════

SUFFIXES = (
    "2",  # Second
    "2nd",  # Second
    "3rd",  # Third
    "b.ed",  # Bachelor of Education
    "b.a.",  # Bachelor of Arts
    "b.eng.",  # Bachelor of Engineering
    "b.f.a.",  # Bachelor of Fine Arts
    "b.mus.",  # Bachelor of Music
    "b.sc.",  # Bachelor of Science
    "ba",  # Bachelor of Arts
    "bba",  # Bachelor of Business Administration
    "beng",  # Bachelor of Engineering
    "bsc",  # Bachelor of Science
    "cfp",  # Certified Financial Planner
    "chfc",  # Chartered Financial Consultant
    "clu",  # Chartered Life Underwriter
    "d.c.",  # Doctor of Chiropractic
    "d.o.",  # Doctor of Osteopathic Medicine
    "di",  # Diplom
    "dipl.-kffr.",  # Diplom-Kauffrau
    "dipl.-kfm.",  # Diplom-Kaufmann
    "dipl.-ing.",  # Diplom-Ingenieur
    "doctor",
    "dr",
    "dr.-ing.",  # Doktor-Ingenieur
    "dr.agr.",  # Doctor Agriculturae
    "dr.h.c.",  # Doctor Honoris Causa
    "dr.habil.",  # Doctor Habilitatus
    "dr.iur.",  # Doctor Iuris
    "dr.jur.",  # Doctor Juris
    "dr.med.",  # Doctor Medicinae
    "dr.med.dent.",  # Doctor Medicinae Dentariae
    "dr.mont.",  # Doctor Montium
    "dr.mult.",  # Doctor Multidisciplinaris
    "dr.nat.techn.",  # Doctor Naturae Technologiae
    "dr.phil.",  # Doctor Philosophiae
    "dr.rer.nat.",  # Doctor Rerum Naturalium
    "dr.rer.pol.",  # Doctor Rerum Politicarum
    "dr.rer.soc.oec.",  # Doctor Rerum Societatis Oeconomicarum
    "dr.scient.med.",  # Doctor Scientiae Medicinae
    "dr.soc.sc.",  # Doctor Scientiarum Socialium
    "dr.theol.",  # Doctor Theologiae
    "esq",  # Esquire
    "esquire",
    "ii",  # Second
    "iii",  # Third
    "iv",  # Fourth
    "j.d.",  # Juris Doctor
    "jnr",  # Junior
    "jr",  # Junior
    "junior",
    "ll.b.",  # Bachelor of Laws
    "ll.m.",  # Master of Laws
    "llm",  # Master of Laws
    "m.a.",  # Master of Arts
    "m.a.i.s.",  # Master of Advanced International Studies
    "m.b.l.",  # Master of Business Law
    "m.d.",  # Doctor of Medicine
    "m.e.s.",  # Master of Environmental Studies
    "m.ed.",  # Master of Education
    "m.eng.",  # Master of Engineering
    "m.f.a.",  # Master of Fine Arts
    "m.mus.",  # Master of Music
    "m.sc.",  # Master of Science
    "ma",  # Master of Arts
    "mag.iur.",  # Magister Iuris
    "mag.med.vet.",  # Magister Medicinae Veterinariae
    "mag.phil.",  # Magister Philosophiae
    "mag.rer.nat.",  # Magister Rerum Naturalium
    "mas",  # Master of Applied Science
    "mba",  # Master of Business Administration
    "md",  # Doctor of Medicine
    "mib",  # Master of International Business
    "mp",  # Master of Public Administration
    "mph",  # Master of Public Health
    "msc",  # Master of Science
    "msw",  # Master of Social Work
    "p.c.",  # Professional Corporation
    "ph.d.",  # Doctor of Philosophy
    "phd",  # Doctor of Philosophy
    "prof",  # Professor
    "professor",
    "senior",
    "snr",  # Senior
    "sr",  # Senior
    "v",  # Fifth
)

TITLES = (
    "dr",
    "miss",
    "mr",
    "mrs",
    "ms",
    "prof",
    "sir",
    "frau",
    "herr",
    "hr",
    "monsieur",
    "captain",
    "doctor",
    "judge",
    "officer",
    "professor",
    "ind",
    "misc",
    "mx",
    "divers",
    "diverse",
    "diverses",
    "diversi",
    "diversos",
    "diversas",
)

# Multi-word entries never match a single token; they are kept so the list can be
# shared with callers that match whole phrases.
TITLES_EXPANDED = (
    "mr", "mrs", "ms", "miss", "dr", "herr", "monsieur", "hr", "frau",
    "a v m", "admiraal", "admiral", "air cdre", "air commodore", "air marshal",
    "air vice marshal", "alderman", "alhaji", "ambassador", "baron", "barones",
    "brig", "brig gen", "brig general", "brigadier", "brigadier general", "brother",
    "canon", "capt", "captain", "cardinal", "cdr", "chief", "cik", "cmdr", "coach",
    "col", "col dr", "colonel", "commandant", "commander", "commissioner",
    "commodore", "comte", "comtessa", "congressman", "conseiller", "consul", "conte",
    "contessa", "corporal", "councillor", "count", "countess", "crown prince",
    "crown princess", "dame", "datin", "dato", "datuk", "datuk seri", "deacon",
    "deaconess", "dean", "dhr", "dipl ing", "doctor", "dott", "dott sa", "dr ing",
    "dra", "drs", "embajador", "embajadora", "en", "encik", "eng", "eur ing",
    "exma sra", "exmo sr", "f o", "father", "first lieutient", "first officer",
    "flt lieut", "flying officer", "fr", "fraulein", "fru", "gen", "generaal",
    "general", "governor", "graaf", "gravin", "group captain", "grp capt", "h e dr",
    "h h", "h m", "h r h", "hajah", "haji", "hajim", "her highness", "her majesty",
    "high chief", "his highness", "his holiness", "his majesty", "hon", "hra", "ing",
    "ir", "jonkheer", "judge", "justice", "khun ying", "kolonel", "lady", "lcda",
    "lic", "lieut", "lieut cdr", "lieut col", "lieut gen", "lord", "m", "m l", "m r",
    "madame", "mademoiselle", "maj gen", "major", "master", "mevrouw", "mlle", "mme",
    "monsignor", "mstr", "nti", "pastor", "president", "prince", "princess",
    "princesse", "prinses", "prof", "prof dr", "prof sir", "professor", "puan",
    "puan sri", "rabbi", "rear admiral", "rev", "rev canon", "rev dr", "rev mother",
    "reverend", "rva", "senator", "sergeant", "sheikh", "sheikha", "sig", "sig na",
    "sig ra", "sir", "sister", "sqn ldr", "sr", "sr d", "sra", "srta", "sultan",
    "tan sri", "tan sri dato", "tengku", "teuku", "than puying", "the hon dr",
    "the hon justice", "the hon miss", "the hon mr", "the hon mrs", "the hon ms",
    "the hon sir", "the very rev", "toh puan", "tun", "vice admiral", "viscount",
    "viscountess", "wg cdr", "ind", "misc", "mx", "divers", "diverse", "diverses",
    "diversi", "diversos", "diversas",
)

PREFIXES = (
    "ab",
    "bar",
    "bin",
    "da",
    "dal",
    "de",
    "de la",
    "del",
    "della",
    "der",
    "di",
    "du",
    "ibn",
    "l'",
    "la",
    "le",
    "san",
    "st",
    "st.",
    "ste",
    "ter",
    "van",
    "van de",
    "van der",
    "van den",
    "vel",
    "ver",
    "vere",
    "von",
)

PREFIXES_EXPANDED = (
    "a", "ab", "antune", "ap", "abu", "al", "alm", "alt", "bab", "bäck", "bar",
    "bath", "bat", "beau", "beck", "ben", "berg", "bet", "bin", "bint", "birch",
    "björk", "björn", "bjur", "da", "dahl", "dal", "de", "degli", "dele", "del",
    "della", "der", "di", "dos", "du", "e", "ek", "el", "escob", "esch", "fleisch",
    "fitz", "fors", "gott", "griff", "haj", "haug", "holm", "ibn", "kauf", "kil",
    "koop", "kvarn", "la", "le", "lind", "lönn", "lund", "mac", "mhic", "mic", "mir",
    "na", "naka", "neder", "nic", "ni", "nin", "nord", "norr", "ny", "o", "ua", "ui'",
    "öfver", "ost", "över", "öz", "papa", "pour", "quarn", "skog", "skoog", "sten",
    "stor", "ström", "söder", "ter", "tre", "türk", "van", "väst", "väster", "vest",
    "von",
)

CONJUNCTIONS = ("&", "and", "et", "e", "of", "the", "und", "y")

FORCE_CASE = (
    # Lowercase surname particles
    "e", "y", "av", "af", "da", "dal", "de", "del", "der", "di", "la", "le", "van",
    "den", "vel", "von",
    # Roman numerals
    "II", "III", "IV",
    # Degrees and professional designations
    "J.D.", "LL.M.", "M.D.", "D.O.", "D.C.", "Ph.D.", "Dipl.-Ing.", "B.A.", "B.Sc.",
    "B.Eng.", "LL.B.", "B.Ed", "B.F.A.", "B.Mus.", "BBA", "M.A.", "M.Sc.", "M.Eng.",
    "M.Ed.", "M.F.A.", "M.Mus.", "MBA", "MPH", "MSW",
    # German academic titles
    "Dr.", "Dr.phil.", "Dr.rer.nat.", "Dr.rer.pol.", "Dr.-Ing.", "Dr.med.",
    "Dr.med.dent.", "Dr.med.vent.", "Dr.jur.", "Dr.theol.", "Dr.agr.", "Dr.soc.sc.",
    "Prof.", "Dr.h.c.", "Dr.mult.", "Dr.habil.", "Dipl.-Kfm.", "Dipl.-Kffr.",
)

# Keys are lowercase with no trailing period.
SUFFIX_SYNONYMS = {
    "jr": "Jr.",
    "jnr": "Jr.",
    "junior": "Jr.",
    "2nd": "Jr.",
    "ii": "Jr.",
    "sr": "Sr.",
    "snr": "Sr.",
    "senior": "Sr.",
    "iii": "III",
    "3rd": "III",
    "iv": "IV",
    "4th": "IV",
    "esq": "Esq.",
    "esquire": "Esq.",
    "phd": "Ph.D.",
    "ph.d": "Ph.D.",
    "md": "M.D.",
    "m.d": "M.D.",
}

TITLE_SYNONYMS = {
    "dr": "Dr.",
    "doctor": "Dr.",
    "prof": "Prof.",
    "professor": "Prof.",
    "mr": "Mr.",
    "mister": "Mr.",
    "mrs": "Mrs.",
    "ms": "Ms.",
}
