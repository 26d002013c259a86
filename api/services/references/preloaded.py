# api/services/references/preloaded.py
"""
Hand-curated interlinear and lexicon data for frequently requested entries.

Served directly without touching the upstream APIs. Verse entries are keyed by
display_form() of the single-verse reference ("Psalms 23:1").
"""

from typing import Optional


def _words(*rows):
    return [
        {"original": original, "translit": translit, "english": english, "strongs": strongs}
        for original, translit, english, strongs in rows
    ]


PRELOADED_VERSES = {
    "Genesis 1:1": {
        "language": "Hebrew",
        "words": _words(
            ("בְּרֵאשִׁית", "bereshit", "In the beginning", "H7225"),
            ("בָּרָא", "bara", "created", "H1254"),
            ("אֱלֹהִים", "elohim", "God", "H430"),
            ("אֵת", "et", "[direct object marker]", "H853"),
            ("הַשָּׁמַיִם", "hashamayim", "the heavens", "H8064"),
            ("וְאֵת", "ve'et", "and", "H853"),
            ("הָאָרֶץ", "ha'aretz", "the earth", "H776"),
        ),
        "fullText": "In the beginning God created the heavens and the earth.",
    },
    "Genesis 1:2": {
        "language": "Hebrew",
        "words": _words(
            ("וְהָאָרֶץ", "veha'aretz", "And the earth", "H776"),
            ("הָיְתָה", "hayetah", "was", "H1961"),
            ("תֹהוּ", "tohu", "formless", "H8414"),
            ("וָבֹהוּ", "vabohu", "and void", "H922"),
            ("וְחֹשֶׁךְ", "vechoshek", "and darkness", "H2822"),
            ("עַל־פְּנֵי", "al-penei", "over the face of", "H5921"),
            ("תְהוֹם", "tehom", "the deep", "H8415"),
            ("וְרוּחַ", "veruach", "And the Spirit of", "H7307"),
            ("אֱלֹהִים", "elohim", "God", "H430"),
            ("מְרַחֶפֶת", "merachefet", "was hovering", "H7363"),
            ("עַל־פְּנֵי", "al-penei", "over the face of", "H5921"),
            ("הַמָּיִם", "hamayim", "the waters", "H4325"),
        ),
        "fullText": (
            "And the earth was without form, and void; and darkness was upon the face "
            "of the deep. And the Spirit of God moved upon the face of the waters."
        ),
    },
    "Genesis 1:3": {
        "language": "Hebrew",
        "words": _words(
            ("וַיֹּאמֶר", "vayomer", "And said", "H559"),
            ("אֱלֹהִים", "elohim", "God", "H430"),
            ("יְהִי", "yehi", "Let there be", "H1961"),
            ("אוֹר", "or", "light", "H216"),
            ("וַיְהִי", "vayehi", "and there was", "H1961"),
            ("אוֹר", "or", "light", "H216"),
        ),
        "fullText": "And God said, Let there be light: and there was light.",
    },
    "Psalms 23:1": {
        "language": "Hebrew",
        "words": _words(
            ("מִזְמוֹר", "mizmor", "A Psalm", "H4210"),
            ("לְדָוִד", "leDavid", "of David", "H1732"),
            ("יְהוָה", "YHWH", "The LORD", "H3068"),
            ("רֹעִי", "ro'i", "is my shepherd", "H7462"),
            ("לֹא", "lo", "not", "H3808"),
            ("אֶחְסָר", "echsar", "I shall want", "H2637"),
        ),
        "fullText": "The LORD is my shepherd; I shall not want.",
    },
    "Proverbs 3:5": {
        "language": "Hebrew",
        "words": _words(
            ("בְּטַח", "betach", "Trust", "H982"),
            ("אֶל", "el", "in", "H413"),
            ("יְהוָה", "YHWH", "the LORD", "H3068"),
            ("בְּכָל", "bekhol", "with all", "H3605"),
            ("לִבֶּךָ", "libekha", "your heart", "H3820"),
            ("וְאֶל", "ve'el", "and not", "H413"),
            ("בִּינָתְךָ", "binatekha", "on your own understanding", "H998"),
            ("אַל", "al", "do not", "H408"),
            ("תִּשָּׁעֵן", "tisha'en", "lean", "H8172"),
        ),
        "fullText": "Trust in the LORD with all thine heart; and lean not unto thine own understanding.",
    },
    "Jeremiah 29:11": {
        "language": "Hebrew",
        "words": _words(
            ("כִּי", "ki", "For", "H3588"),
            ("אָנֹכִי", "anokhi", "I", "H595"),
            ("יָדַעְתִּי", "yadati", "know", "H3045"),
            ("אֶת", "et", "[obj]", "H853"),
            ("הַמַּחֲשָׁבֹת", "hamachshavot", "the plans", "H4284"),
            ("אֲשֶׁר", "asher", "that", "H834"),
            ("אָנֹכִי", "anokhi", "I", "H595"),
            ("חֹשֵׁב", "choshev", "am thinking", "H2803"),
            ("עֲלֵיכֶם", "aleykhem", "concerning you", "H5921"),
        ),
        "fullText": (
            "For I know the thoughts that I think toward you, saith the LORD, thoughts "
            "of peace, and not of evil, to give you an expected end."
        ),
    },
    "John 1:1": {
        "language": "Greek",
        "words": _words(
            ("Ἐν", "En", "In", "G1722"),
            ("ἀρχῇ", "archē", "the beginning", "G746"),
            ("ἦν", "ēn", "was", "G1510"),
            ("ὁ", "ho", "the", "G3588"),
            ("Λόγος", "Logos", "Word", "G3056"),
            ("καὶ", "kai", "and", "G2532"),
            ("ὁ", "ho", "the", "G3588"),
            ("Λόγος", "Logos", "Word", "G3056"),
            ("ἦν", "ēn", "was", "G1510"),
            ("πρὸς", "pros", "with", "G4314"),
            ("τὸν", "ton", "the", "G3588"),
            ("Θεόν", "Theon", "God", "G2316"),
            ("καὶ", "kai", "and", "G2532"),
            ("Θεὸς", "Theos", "God", "G2316"),
            ("ἦν", "ēn", "was", "G1510"),
            ("ὁ", "ho", "the", "G3588"),
            ("Λόγος", "Logos", "Word", "G3056"),
        ),
        "fullText": "In the beginning was the Word, and the Word was with God, and the Word was God.",
    },
    "John 3:16": {
        "language": "Greek",
        "words": _words(
            ("Οὕτως", "Houtōs", "For thus", "G3779"),
            ("γὰρ", "gar", "for", "G1063"),
            ("ἠγάπησεν", "ēgapēsen", "loved", "G25"),
            ("ὁ", "ho", "the", "G3588"),
            ("Θεὸς", "Theos", "God", "G2316"),
            ("τὸν", "ton", "the", "G3588"),
            ("κόσμον", "kosmon", "world", "G2889"),
            ("ὥστε", "hōste", "that", "G5620"),
            ("τὸν", "ton", "the", "G3588"),
            ("Υἱὸν", "Huion", "Son", "G5207"),
            ("τὸν", "ton", "the", "G3588"),
            ("μονογενῆ", "monogenē", "only begotten", "G3439"),
            ("ἔδωκεν", "edōken", "He gave", "G1325"),
            ("ἵνα", "hina", "that", "G2443"),
            ("πᾶς", "pas", "everyone", "G3956"),
            ("ὁ", "ho", "who", "G3588"),
            ("πιστεύων", "pisteuōn", "believes", "G4100"),
            ("εἰς", "eis", "in", "G1519"),
            ("αὐτὸν", "auton", "Him", "G846"),
            ("μὴ", "mē", "not", "G3361"),
            ("ἀπόληται", "apolētai", "should perish", "G622"),
            ("ἀλλ᾽", "all", "but", "G235"),
            ("ἔχῃ", "echē", "have", "G2192"),
            ("ζωὴν", "zōēn", "life", "G2222"),
            ("αἰώνιον", "aiōnion", "eternal", "G166"),
        ),
        "fullText": (
            "For God so loved the world, that he gave his only begotten Son, that "
            "whosoever believeth in him should not perish, but have everlasting life."
        ),
    },
    "Romans 8:28": {
        "language": "Greek",
        "words": _words(
            ("οἴδαμεν", "oidamen", "we know", "G1492"),
            ("δὲ", "de", "And", "G1161"),
            ("ὅτι", "hoti", "that", "G3754"),
            ("τοῖς", "tois", "to those", "G3588"),
            ("ἀγαπῶσιν", "agapōsin", "loving", "G25"),
            ("τὸν", "ton", "the", "G3588"),
            ("Θεὸν", "Theon", "God", "G2316"),
            ("πάντα", "panta", "all things", "G3956"),
            ("συνεργεῖ", "sunergei", "work together", "G4903"),
            ("εἰς", "eis", "for", "G1519"),
            ("ἀγαθόν", "agathon", "good", "G18"),
        ),
        "fullText": "And we know that all things work together for good to them that love God.",
    },
    "Philippians 4:13": {
        "language": "Greek",
        "words": _words(
            ("πάντα", "panta", "All things", "G3956"),
            ("ἰσχύω", "ischuō", "I can do", "G2480"),
            ("ἐν", "en", "through", "G1722"),
            ("τῷ", "tō", "the One", "G3588"),
            ("ἐνδυναμοῦντί", "endunamounti", "strengthening", "G1743"),
            ("με", "me", "me", "G1473"),
        ),
        "fullText": "I can do all things through Christ which strengtheneth me.",
    },
}


PRELOADED_STRONGS = {
    "H430": {
        "lemma": "אֱלֹהִים",
        "translit": "elohim",
        "pronunciation": "el-o-heem'",
        "partOfSpeech": "noun masculine plural",
        "definition": "God, gods, judges, angels",
        "longDefinition": (
            "Plural form of 'eloah'. Used to denote the one true God (with singular verbs). "
            "The plural form may hint at the fullness and majesty of God."
        ),
        "usage": "Used 2,606 times in the Hebrew Bible",
    },
    "H1254": {
        "lemma": "בָּרָא",
        "translit": "bara",
        "pronunciation": "baw-raw'",
        "partOfSpeech": "verb",
        "definition": "to create, shape, form",
        "longDefinition": (
            "A verb used only for divine creation, never for human making. "
            "Emphasizes creating something new."
        ),
        "usage": "Used 54 times, always with God as subject",
    },
    "H7225": {
        "lemma": "רֵאשִׁית",
        "translit": "reshith",
        "pronunciation": "ray-sheeth'",
        "partOfSpeech": "noun feminine",
        "definition": "beginning, first, chief",
        "longDefinition": (
            "The first in time, place, order, or rank. "
            "Refers to the absolute beginning of creation."
        ),
        "usage": "Used 51 times in the Hebrew Bible",
    },
    "H3068": {
        "lemma": "יְהֹוָה",
        "translit": "YHWH",
        "pronunciation": "yeh-ho-vaw'",
        "partOfSpeech": "proper noun",
        "definition": "the LORD, Yahweh",
        "longDefinition": (
            "The personal covenant name of God, often rendered 'LORD' in English Bibles. "
            "Related to 'I AM WHO I AM.'"
        ),
        "usage": "Used 6,519 times, the most frequent name for God",
    },
    "H7307": {
        "lemma": "רוּחַ",
        "translit": "ruach",
        "pronunciation": "roo'-akh",
        "partOfSpeech": "noun feminine",
        "definition": "spirit, wind, breath",
        "longDefinition": (
            "Can refer to wind, breath, or spirit (human or divine). The Spirit of God "
            "(Ruach Elohim) moved over the waters in Genesis 1:2."
        ),
        "usage": "Used 378 times in the Hebrew Bible",
    },
    "H2617": {
        "lemma": "חֶסֶד",
        "translit": "chesed",
        "pronunciation": "kheh'-sed",
        "partOfSpeech": "noun masculine",
        "definition": "lovingkindness, mercy, steadfast love",
        "longDefinition": (
            "Covenant faithfulness and loyal love. One of the most theologically rich "
            "words, with no single English equivalent."
        ),
        "usage": "Used 248 times, often describing God's character",
    },
    "G26": {
        "lemma": "ἀγάπη",
        "translit": "agape",
        "pronunciation": "ag-ah'-pay",
        "partOfSpeech": "noun feminine",
        "definition": "love, charity, affection",
        "longDefinition": (
            "Selfless, sacrificial, unconditional love. The love God has for humanity "
            "and calls believers to show others."
        ),
        "usage": "Used 116 times in the New Testament",
    },
    "G25": {
        "lemma": "ἀγαπάω",
        "translit": "agapao",
        "pronunciation": "ag-ap-ah'-o",
        "partOfSpeech": "verb",
        "definition": "to love",
        "longDefinition": (
            "The verb form of agapē. To love unconditionally, with purpose and "
            "commitment rather than emotion alone."
        ),
        "usage": "Used 143 times in the New Testament",
    },
    "G2316": {
        "lemma": "θεός",
        "translit": "theos",
        "pronunciation": "theh'-os",
        "partOfSpeech": "noun masculine",
        "definition": "God, a deity",
        "longDefinition": (
            "The supreme Divinity. Used throughout the New Testament to refer to "
            "the one true God."
        ),
        "usage": "Used 1,343 times in the New Testament",
    },
    "G3056": {
        "lemma": "λόγος",
        "translit": "logos",
        "pronunciation": "log'-os",
        "partOfSpeech": "noun masculine",
        "definition": "word, speech, reason",
        "longDefinition": (
            "The Word, divine self-expression. In John 1:1, identifies Jesus as the "
            "eternal Word of God made flesh."
        ),
        "usage": "Used 330 times in the New Testament",
    },
    "G4100": {
        "lemma": "πιστεύω",
        "translit": "pisteuo",
        "pronunciation": "pist-yoo'-o",
        "partOfSpeech": "verb",
        "definition": "to believe, trust, have faith",
        "longDefinition": (
            "To trust in, rely upon, place confidence in. More than intellectual "
            "assent: active trust and commitment."
        ),
        "usage": "Used 248 times in the New Testament",
    },
    "G4102": {
        "lemma": "πίστις",
        "translit": "pistis",
        "pronunciation": "pis'-tis",
        "partOfSpeech": "noun feminine",
        "definition": "faith, belief, trust",
        "longDefinition": (
            "Conviction of truth, faithfulness. The means by which salvation is "
            "received, trusting in Christ."
        ),
        "usage": "Used 244 times in the New Testament",
    },
    "G5485": {
        "lemma": "χάρις",
        "translit": "charis",
        "pronunciation": "khar'-ece",
        "partOfSpeech": "noun feminine",
        "definition": "grace, favor, gratitude",
        "longDefinition": (
            "Unmerited favor from God. The foundation of salvation, received "
            "by grace through faith."
        ),
        "usage": "Used 155 times in the New Testament",
    },
    "G1680": {
        "lemma": "ἐλπίς",
        "translit": "elpis",
        "pronunciation": "el-pece'",
        "partOfSpeech": "noun feminine",
        "definition": "hope, expectation",
        "longDefinition": (
            "Confident expectation of good. Christian hope is certain because it "
            "rests on God's promises."
        ),
        "usage": "Used 53 times in the New Testament",
    },
    "G746": {
        "lemma": "ἀρχή",
        "translit": "arche",
        "pronunciation": "ar-khay'",
        "partOfSpeech": "noun feminine",
        "definition": "beginning, origin, first cause",
        "longDefinition": (
            "The beginning point, the first in a series, or ruling power. "
            "Opens John's Gospel echoing Genesis."
        ),
        "usage": "Used 58 times in the New Testament",
    },
}


def get_preloaded_verse(display: str) -> Optional[dict]:
    """Curated interlinear entry for a display-form reference, or None."""
    return PRELOADED_VERSES.get(display)


def get_preloaded_strongs(number: str) -> Optional[dict]:
    """Curated lexicon entry for a normalized Strong's number, or None."""
    return PRELOADED_STRONGS.get(number)
