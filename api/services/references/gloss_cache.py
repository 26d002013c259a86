# api/services/references/gloss_cache.py
"""
Curated Strong's-number overrides for Hebrew glosses.

The lexicon's automatically extracted short definitions often lead with a
secondary sense (H430 "rulers, judges" instead of "God"), so these entries
take priority over anything fetched for Hebrew words. Greek words are not
curated here.
"""

import re
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class GlossCacheEntry:
    gloss: str
    transliteration: str


_STRONGS_PATTERN = re.compile(r"^\s*([HG])0*(\d+)[a-z]?\s*$", re.IGNORECASE)


def normalize_strongs(raw: Optional[str]) -> Optional[str]:
    """
    Canonicalize a Strong's number: "h0430" -> "H430", "G26 " -> "G26".

    Returns None if the value is not a prefixed Strong's number.
    """
    if not raw:
        return None
    match = _STRONGS_PATTERN.match(raw)
    if not match or int(match.group(2)) == 0:
        return None
    return f"{match.group(1).upper()}{int(match.group(2))}"


GLOSS_CACHE = {
    # Names and titles of God
    "H430": GlossCacheEntry("God", "elohim"),
    "H410": GlossCacheEntry("God", "el"),
    "H433": GlossCacheEntry("God", "eloah"),
    "H3068": GlossCacheEntry("LORD", "YHWH"),
    "H3050": GlossCacheEntry("LORD", "Yah"),
    "H136": GlossCacheEntry("Lord", "adonai"),
    "H7706": GlossCacheEntry("Almighty", "shaddai"),
    "H5945": GlossCacheEntry("Most High", "elyon"),

    # Creation vocabulary (Genesis 1)
    "H7225": GlossCacheEntry("beginning", "reshit"),
    "H1254": GlossCacheEntry("created", "bara"),
    "H8064": GlossCacheEntry("heavens", "shamayim"),
    "H776": GlossCacheEntry("earth", "erets"),
    "H8414": GlossCacheEntry("formless", "tohu"),
    "H922": GlossCacheEntry("void", "bohu"),
    "H2822": GlossCacheEntry("darkness", "choshek"),
    "H6440": GlossCacheEntry("face", "panim"),
    "H8415": GlossCacheEntry("deep", "tehom"),
    "H7307": GlossCacheEntry("spirit", "ruach"),
    "H7363": GlossCacheEntry("hovering", "rachaph"),
    "H4325": GlossCacheEntry("waters", "mayim"),
    "H216": GlossCacheEntry("light", "or"),
    "H3117": GlossCacheEntry("day", "yom"),
    "H3915": GlossCacheEntry("night", "layil"),

    # Frequent verbs
    "H559": GlossCacheEntry("said", "amar"),
    "H1961": GlossCacheEntry("was", "hayah"),
    "H7200": GlossCacheEntry("saw", "ra'ah"),
    "H6213": GlossCacheEntry("made", "asah"),
    "H3045": GlossCacheEntry("know", "yada"),
    "H982": GlossCacheEntry("trust", "batach"),
    "H7462": GlossCacheEntry("shepherd", "ro'eh"),
    "H2637": GlossCacheEntry("lack", "chaser"),

    # Particles and function words
    "H853": GlossCacheEntry("[obj]", "et"),
    "H834": GlossCacheEntry("which", "asher"),
    "H3588": GlossCacheEntry("for", "ki"),
    "H3808": GlossCacheEntry("not", "lo"),
    "H408": GlossCacheEntry("not", "al"),
    "H413": GlossCacheEntry("to", "el"),
    "H5921": GlossCacheEntry("upon", "al"),
    "H3605": GlossCacheEntry("all", "kol"),
    "H595": GlossCacheEntry("I", "anokhi"),

    # Theological vocabulary
    "H2617": GlossCacheEntry("lovingkindness", "chesed"),
    "H7965": GlossCacheEntry("peace", "shalom"),
    "H6944": GlossCacheEntry("holiness", "qodesh"),
    "H3519": GlossCacheEntry("glory", "kavod"),
    "H8451": GlossCacheEntry("law", "torah"),
    "H1697": GlossCacheEntry("word", "davar"),
    "H1285": GlossCacheEntry("covenant", "berit"),
    "H5315": GlossCacheEntry("soul", "nephesh"),
    "H3820": GlossCacheEntry("heart", "lev"),
    "H998": GlossCacheEntry("understanding", "binah"),
    "H4284": GlossCacheEntry("plans", "machashavah"),
    "H2803": GlossCacheEntry("think", "chashav"),
    "H120": GlossCacheEntry("man", "adam"),
    "H1121": GlossCacheEntry("son", "ben"),
    "H4210": GlossCacheEntry("psalm", "mizmor"),
    "H1732": GlossCacheEntry("David", "david"),
}


def lookup(strongs_number: str) -> Optional[GlossCacheEntry]:
    """
    Look up a curated gloss.

    Args:
        strongs_number: Strong's number in any accepted spelling ("H430", "h0430")

    Returns:
        GlossCacheEntry or None on a miss
    """
    key = normalize_strongs(strongs_number)
    if key is None:
        return None
    return GLOSS_CACHE.get(key)
