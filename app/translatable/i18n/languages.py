"""Language catalog for the translation store.

Defines the fixed set of recognized ISO 639-1 language identifiers and the
validation entry point used wherever a language enters the system.
"""

from enum import Enum
from typing import Any

from translatable.i18n.errors import InvalidLanguage


class Language(str, Enum):
    """Recognized ISO 639-1 language identifiers.

    Values are the lower-case two-letter codes (e.g., "en", "es").
    Instances are obtained through validate() or Language.from_string().
    """

    AA = "aa"
    AB = "ab"
    AE = "ae"
    AF = "af"
    AK = "ak"
    AM = "am"
    AN = "an"
    AR = "ar"
    AS = "as"
    AV = "av"
    AY = "ay"
    AZ = "az"
    BA = "ba"
    BE = "be"
    BG = "bg"
    BH = "bh"
    BI = "bi"
    BM = "bm"
    BN = "bn"
    BO = "bo"
    BR = "br"
    BS = "bs"
    CA = "ca"
    CE = "ce"
    CH = "ch"
    CO = "co"
    CR = "cr"
    CS = "cs"
    CU = "cu"
    CV = "cv"
    CY = "cy"
    DA = "da"
    DE = "de"
    DV = "dv"
    DZ = "dz"
    EE = "ee"
    EL = "el"
    EN = "en"
    EO = "eo"
    ES = "es"
    ET = "et"
    EU = "eu"
    FA = "fa"
    FF = "ff"
    FI = "fi"
    FJ = "fj"
    FO = "fo"
    FR = "fr"
    FY = "fy"
    GA = "ga"
    GD = "gd"
    GL = "gl"
    GN = "gn"
    GU = "gu"
    GV = "gv"
    HA = "ha"
    HE = "he"
    HI = "hi"
    HO = "ho"
    HR = "hr"
    HT = "ht"
    HU = "hu"
    HY = "hy"
    HZ = "hz"
    IA = "ia"
    ID = "id"
    IE = "ie"
    IG = "ig"
    II = "ii"
    IK = "ik"
    IO = "io"
    IS = "is"
    IT = "it"
    IU = "iu"
    JA = "ja"
    JV = "jv"
    KA = "ka"
    KG = "kg"
    KI = "ki"
    KJ = "kj"
    KK = "kk"
    KL = "kl"
    KM = "km"
    KN = "kn"
    KO = "ko"
    KR = "kr"
    KS = "ks"
    KU = "ku"
    KV = "kv"
    KW = "kw"
    KY = "ky"
    LA = "la"
    LB = "lb"
    LG = "lg"
    LI = "li"
    LN = "ln"
    LO = "lo"
    LT = "lt"
    LU = "lu"
    LV = "lv"
    MG = "mg"
    MH = "mh"
    MI = "mi"
    MK = "mk"
    ML = "ml"
    MN = "mn"
    MR = "mr"
    MS = "ms"
    MT = "mt"
    MY = "my"
    NA = "na"
    NB = "nb"
    ND = "nd"
    NE = "ne"
    NG = "ng"
    NL = "nl"
    NN = "nn"
    NO = "no"
    NR = "nr"
    NV = "nv"
    NY = "ny"
    OC = "oc"
    OJ = "oj"
    OM = "om"
    OR = "or"
    OS = "os"
    PA = "pa"
    PI = "pi"
    PL = "pl"
    PS = "ps"
    PT = "pt"
    QU = "qu"
    RM = "rm"
    RN = "rn"
    RO = "ro"
    RU = "ru"
    RW = "rw"
    SA = "sa"
    SC = "sc"
    SD = "sd"
    SE = "se"
    SG = "sg"
    SI = "si"
    SK = "sk"
    SL = "sl"
    SM = "sm"
    SN = "sn"
    SO = "so"
    SQ = "sq"
    SR = "sr"
    SS = "ss"
    ST = "st"
    SU = "su"
    SV = "sv"
    SW = "sw"
    TA = "ta"
    TE = "te"
    TG = "tg"
    TH = "th"
    TI = "ti"
    TK = "tk"
    TL = "tl"
    TN = "tn"
    TO = "to"
    TR = "tr"
    TS = "ts"
    TT = "tt"
    TW = "tw"
    TY = "ty"
    UG = "ug"
    UK = "uk"
    UR = "ur"
    UZ = "uz"
    VE = "ve"
    VI = "vi"
    VO = "vo"
    WA = "wa"
    WO = "wo"
    XH = "xh"
    YI = "yi"
    YO = "yo"
    ZA = "za"
    ZH = "zh"
    ZU = "zu"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_string(cls, code: str) -> "Language":
        """Convert a language code to a Language.

        Args:
            code: Two-letter code; surrounding whitespace and case are ignored.

        Returns:
            Matching Language.

        Raises:
            InvalidLanguage: If the code is not in the catalog.
        """
        return validate(code)

    @property
    def display_name(self) -> str:
        """English name of the language (e.g., "Spanish" for "es")."""
        return LANGUAGE_NAMES[self]


LANGUAGE_NAMES = {
    Language.AA: "Afar",
    Language.AB: "Abkhazian",
    Language.AE: "Avestan",
    Language.AF: "Afrikaans",
    Language.AK: "Akan",
    Language.AM: "Amharic",
    Language.AN: "Aragonese",
    Language.AR: "Arabic",
    Language.AS: "Assamese",
    Language.AV: "Avaric",
    Language.AY: "Aymara",
    Language.AZ: "Azerbaijani",
    Language.BA: "Bashkir",
    Language.BE: "Belarusian",
    Language.BG: "Bulgarian",
    Language.BH: "Bihari",
    Language.BI: "Bislama",
    Language.BM: "Bambara",
    Language.BN: "Bengali",
    Language.BO: "Tibetan",
    Language.BR: "Breton",
    Language.BS: "Bosnian",
    Language.CA: "Catalan",
    Language.CE: "Chechen",
    Language.CH: "Chamorro",
    Language.CO: "Corsican",
    Language.CR: "Cree",
    Language.CS: "Czech",
    Language.CU: "Church Slavic",
    Language.CV: "Chuvash",
    Language.CY: "Welsh",
    Language.DA: "Danish",
    Language.DE: "German",
    Language.DV: "Divehi",
    Language.DZ: "Dzongkha",
    Language.EE: "Ewe",
    Language.EL: "Greek",
    Language.EN: "English",
    Language.EO: "Esperanto",
    Language.ES: "Spanish",
    Language.ET: "Estonian",
    Language.EU: "Basque",
    Language.FA: "Persian",
    Language.FF: "Fulah",
    Language.FI: "Finnish",
    Language.FJ: "Fijian",
    Language.FO: "Faroese",
    Language.FR: "French",
    Language.FY: "Western Frisian",
    Language.GA: "Irish",
    Language.GD: "Gaelic",
    Language.GL: "Galician",
    Language.GN: "Guarani",
    Language.GU: "Gujarati",
    Language.GV: "Manx",
    Language.HA: "Hausa",
    Language.HE: "Hebrew",
    Language.HI: "Hindi",
    Language.HO: "Hiri Motu",
    Language.HR: "Croatian",
    Language.HT: "Haitian",
    Language.HU: "Hungarian",
    Language.HY: "Armenian",
    Language.HZ: "Herero",
    Language.IA: "Interlingua",
    Language.ID: "Indonesian",
    Language.IE: "Interlingue",
    Language.IG: "Igbo",
    Language.II: "Sichuan Yi",
    Language.IK: "Inupiaq",
    Language.IO: "Ido",
    Language.IS: "Icelandic",
    Language.IT: "Italian",
    Language.IU: "Inuktitut",
    Language.JA: "Japanese",
    Language.JV: "Javanese",
    Language.KA: "Georgian",
    Language.KG: "Kongo",
    Language.KI: "Kikuyu",
    Language.KJ: "Kuanyama",
    Language.KK: "Kazakh",
    Language.KL: "Kalaallisut",
    Language.KM: "Central Khmer",
    Language.KN: "Kannada",
    Language.KO: "Korean",
    Language.KR: "Kanuri",
    Language.KS: "Kashmiri",
    Language.KU: "Kurdish",
    Language.KV: "Komi",
    Language.KW: "Cornish",
    Language.KY: "Kirghiz",
    Language.LA: "Latin",
    Language.LB: "Luxembourgish",
    Language.LG: "Ganda",
    Language.LI: "Limburgan",
    Language.LN: "Lingala",
    Language.LO: "Lao",
    Language.LT: "Lithuanian",
    Language.LU: "Luba-Katanga",
    Language.LV: "Latvian",
    Language.MG: "Malagasy",
    Language.MH: "Marshallese",
    Language.MI: "Maori",
    Language.MK: "Macedonian",
    Language.ML: "Malayalam",
    Language.MN: "Mongolian",
    Language.MR: "Marathi",
    Language.MS: "Malay",
    Language.MT: "Maltese",
    Language.MY: "Burmese",
    Language.NA: "Nauru",
    Language.NB: "Norwegian Bokmål",
    Language.ND: "North Ndebele",
    Language.NE: "Nepali",
    Language.NG: "Ndonga",
    Language.NL: "Dutch",
    Language.NN: "Norwegian Nynorsk",
    Language.NO: "Norwegian",
    Language.NR: "South Ndebele",
    Language.NV: "Navajo",
    Language.NY: "Chichewa",
    Language.OC: "Occitan",
    Language.OJ: "Ojibwa",
    Language.OM: "Oromo",
    Language.OR: "Oriya",
    Language.OS: "Ossetian",
    Language.PA: "Punjabi",
    Language.PI: "Pali",
    Language.PL: "Polish",
    Language.PS: "Pashto",
    Language.PT: "Portuguese",
    Language.QU: "Quechua",
    Language.RM: "Romansh",
    Language.RN: "Rundi",
    Language.RO: "Romanian",
    Language.RU: "Russian",
    Language.RW: "Kinyarwanda",
    Language.SA: "Sanskrit",
    Language.SC: "Sardinian",
    Language.SD: "Sindhi",
    Language.SE: "Northern Sami",
    Language.SG: "Sango",
    Language.SI: "Sinhala",
    Language.SK: "Slovak",
    Language.SL: "Slovenian",
    Language.SM: "Samoan",
    Language.SN: "Shona",
    Language.SO: "Somali",
    Language.SQ: "Albanian",
    Language.SR: "Serbian",
    Language.SS: "Swati",
    Language.ST: "Southern Sotho",
    Language.SU: "Sundanese",
    Language.SV: "Swedish",
    Language.SW: "Swahili",
    Language.TA: "Tamil",
    Language.TE: "Telugu",
    Language.TG: "Tajik",
    Language.TH: "Thai",
    Language.TI: "Tigrinya",
    Language.TK: "Turkmen",
    Language.TL: "Tagalog",
    Language.TN: "Tswana",
    Language.TO: "Tonga",
    Language.TR: "Turkish",
    Language.TS: "Tsonga",
    Language.TT: "Tatar",
    Language.TW: "Twi",
    Language.TY: "Tahitian",
    Language.UG: "Uighur",
    Language.UK: "Ukrainian",
    Language.UR: "Urdu",
    Language.UZ: "Uzbek",
    Language.VE: "Venda",
    Language.VI: "Vietnamese",
    Language.VO: "Volapük",
    Language.WA: "Walloon",
    Language.WO: "Wolof",
    Language.XH: "Xhosa",
    Language.YI: "Yiddish",
    Language.YO: "Yoruba",
    Language.ZA: "Zhuang",
    Language.ZH: "Chinese",
    Language.ZU: "Zulu",
}


def validate(code: Any) -> Language:
    """Validate a language code against the catalog.

    Codes are normalized by stripping surrounding whitespace and lower-casing
    before the lookup, so "ES" and " es " both resolve to Language.ES.

    Args:
        code: Language code or an existing Language.

    Returns:
        The matching Language.

    Raises:
        InvalidLanguage: If the code is not a string or not in the catalog.
    """
    if isinstance(code, Language):
        return code
    if not isinstance(code, str):
        raise InvalidLanguage(repr(code))
    try:
        return Language(code.strip().lower())
    except ValueError as e:
        raise InvalidLanguage(code) from e


def is_language(code: Any) -> bool:
    """Check whether a code is a recognized language without raising."""
    try:
        validate(code)
    except InvalidLanguage:
        return False
    return True
