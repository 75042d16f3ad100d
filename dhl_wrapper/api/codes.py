# dhl_wrapper/api/codes.py
# Author: dhl-wrapper

"""
Country and language vocabularies used by DHL request parameters and payloads.
"""

from enum import Enum

class CountryCode(Enum):
    """Two-letter country codes (ISO 3166-1 alpha-2)"""
    AD = "AD"  # Andorra
    AE = "AE"  # United Arab Emirates
    AF = "AF"  # Afghanistan
    AG = "AG"  # Antigua and Barbuda
    AI = "AI"  # Anguilla
    AL = "AL"  # Albania
    AM = "AM"  # Armenia
    AO = "AO"  # Angola
    AQ = "AQ"  # Antarctica
    AR = "AR"  # Argentina
    AS = "AS"  # American Samoa
    AT = "AT"  # Austria
    AU = "AU"  # Australia
    AW = "AW"  # Aruba
    AX = "AX"  # Åland Islands
    AZ = "AZ"  # Azerbaijan
    BA = "BA"  # Bosnia and Herzegovina
    BB = "BB"  # Barbados
    BD = "BD"  # Bangladesh
    BE = "BE"  # Belgium
    BF = "BF"  # Burkina Faso
    BG = "BG"  # Bulgaria
    BH = "BH"  # Bahrain
    BI = "BI"  # Burundi
    BJ = "BJ"  # Benin
    BL = "BL"  # Saint Barthélemy
    BM = "BM"  # Bermuda
    BN = "BN"  # Brunei Darussalam
    BO = "BO"  # Bolivia (Plurinational State of)
    BQ = "BQ"  # Bonaire, Sint Eustatius and Saba
    BR = "BR"  # Brazil
    BS = "BS"  # Bahamas
    BT = "BT"  # Bhutan
    BV = "BV"  # Bouvet Island
    BW = "BW"  # Botswana
    BY = "BY"  # Belarus
    BZ = "BZ"  # Belize
    CA = "CA"  # Canada
    CC = "CC"  # Cocos (Keeling) Islands
    CD = "CD"  # Congo, Democratic Republic of the
    CF = "CF"  # Central African Republic
    CG = "CG"  # Congo
    CH = "CH"  # Switzerland
    CI = "CI"  # Côte d'Ivoire
    CK = "CK"  # Cook Islands
    CL = "CL"  # Chile
    CM = "CM"  # Cameroon
    CN = "CN"  # China
    CO = "CO"  # Colombia
    CR = "CR"  # Costa Rica
    CU = "CU"  # Cuba
    CV = "CV"  # Cabo Verde
    CW = "CW"  # Curaçao
    CX = "CX"  # Christmas Island
    CY = "CY"  # Cyprus
    CZ = "CZ"  # Czechia
    DE = "DE"  # Germany
    DJ = "DJ"  # Djibouti
    DK = "DK"  # Denmark
    DM = "DM"  # Dominica
    DO = "DO"  # Dominican Republic
    DZ = "DZ"  # Algeria
    EC = "EC"  # Ecuador
    EE = "EE"  # Estonia
    EG = "EG"  # Egypt
    EH = "EH"  # Western Sahara
    ER = "ER"  # Eritrea
    ES = "ES"  # Spain
    ET = "ET"  # Ethiopia
    FI = "FI"  # Finland
    FJ = "FJ"  # Fiji
    FK = "FK"  # Falkland Islands (Malvinas)
    FM = "FM"  # Micronesia (Federated States of)
    FO = "FO"  # Faroe Islands
    FR = "FR"  # France
    GA = "GA"  # Gabon
    GB = "GB"  # United Kingdom of Great Britain and Northern Ireland
    GD = "GD"  # Grenada
    GE = "GE"  # Georgia
    GF = "GF"  # French Guiana
    GG = "GG"  # Guernsey
    GH = "GH"  # Ghana
    GI = "GI"  # Gibraltar
    GL = "GL"  # Greenland
    GM = "GM"  # Gambia
    GN = "GN"  # Guinea
    GP = "GP"  # Guadeloupe
    GQ = "GQ"  # Equatorial Guinea
    GR = "GR"  # Greece
    GS = "GS"  # South Georgia and the South Sandwich Islands
    GT = "GT"  # Guatemala
    GU = "GU"  # Guam
    GW = "GW"  # Guinea-Bissau
    GY = "GY"  # Guyana
    HK = "HK"  # Hong Kong
    HM = "HM"  # Heard Island and McDonald Islands
    HN = "HN"  # Honduras
    HR = "HR"  # Croatia
    HT = "HT"  # Haiti
    HU = "HU"  # Hungary
    ID = "ID"  # Indonesia
    IE = "IE"  # Ireland
    IL = "IL"  # Israel
    IM = "IM"  # Isle of Man
    IN = "IN"  # India
    IO = "IO"  # British Indian Ocean Territory
    IQ = "IQ"  # Iraq
    IR = "IR"  # Iran (Islamic Republic of)
    IS = "IS"  # Iceland
    IT = "IT"  # Italy
    JE = "JE"  # Jersey
    JM = "JM"  # Jamaica
    JO = "JO"  # Jordan
    JP = "JP"  # Japan
    KE = "KE"  # Kenya
    KG = "KG"  # Kyrgyzstan
    KH = "KH"  # Cambodia
    KI = "KI"  # Kiribati
    KM = "KM"  # Comoros
    KN = "KN"  # Saint Kitts and Nevis
    KP = "KP"  # Korea (Democratic People's Republic of)
    KR = "KR"  # Korea, Republic of
    KW = "KW"  # Kuwait
    KY = "KY"  # Cayman Islands
    KZ = "KZ"  # Kazakhstan
    LA = "LA"  # Lao People's Democratic Republic
    LB = "LB"  # Lebanon
    LC = "LC"  # Saint Lucia
    LI = "LI"  # Liechtenstein
    LK = "LK"  # Sri Lanka
    LR = "LR"  # Liberia
    LS = "LS"  # Lesotho
    LT = "LT"  # Lithuania
    LU = "LU"  # Luxembourg
    LV = "LV"  # Latvia
    LY = "LY"  # Libya
    MA = "MA"  # Morocco
    MC = "MC"  # Monaco
    MD = "MD"  # Moldova, Republic of
    ME = "ME"  # Montenegro
    MF = "MF"  # Saint Martin (French part)
    MG = "MG"  # Madagascar
    MH = "MH"  # Marshall Islands
    MK = "MK"  # North Macedonia
    ML = "ML"  # Mali
    MM = "MM"  # Myanmar
    MN = "MN"  # Mongolia
    MO = "MO"  # Macao
    MP = "MP"  # Northern Mariana Islands
    MQ = "MQ"  # Martinique
    MR = "MR"  # Mauritania
    MS = "MS"  # Montserrat
    MT = "MT"  # Malta
    MU = "MU"  # Mauritius
    MV = "MV"  # Maldives
    MW = "MW"  # Malawi
    MX = "MX"  # Mexico
    MY = "MY"  # Malaysia
    MZ = "MZ"  # Mozambique
    NA = "NA"  # Namibia
    NC = "NC"  # New Caledonia
    NE = "NE"  # Niger
    NF = "NF"  # Norfolk Island
    NG = "NG"  # Nigeria
    NI = "NI"  # Nicaragua
    NL = "NL"  # Netherlands
    NO = "NO"  # Norway
    NP = "NP"  # Nepal
    NR = "NR"  # Nauru
    NU = "NU"  # Niue
    NZ = "NZ"  # New Zealand
    OM = "OM"  # Oman
    PA = "PA"  # Panama
    PE = "PE"  # Peru
    PF = "PF"  # French Polynesia
    PG = "PG"  # Papua New Guinea
    PH = "PH"  # Philippines
    PK = "PK"  # Pakistan
    PL = "PL"  # Poland
    PM = "PM"  # Saint Pierre and Miquelon
    PN = "PN"  # Pitcairn
    PR = "PR"  # Puerto Rico
    PS = "PS"  # Palestine, State of
    PT = "PT"  # Portugal
    PW = "PW"  # Palau
    PY = "PY"  # Paraguay
    QA = "QA"  # Qatar
    RE = "RE"  # Réunion
    RO = "RO"  # Romania
    RS = "RS"  # Serbia
    RU = "RU"  # Russian Federation
    RW = "RW"  # Rwanda
    SA = "SA"  # Saudi Arabia
    SB = "SB"  # Solomon Islands
    SC = "SC"  # Seychelles
    SD = "SD"  # Sudan
    SE = "SE"  # Sweden
    SG = "SG"  # Singapore
    SH = "SH"  # Saint Helena, Ascension and Tristan da Cunha
    SI = "SI"  # Slovenia
    SJ = "SJ"  # Svalbard and Jan Mayen
    SK = "SK"  # Slovakia
    SL = "SL"  # Sierra Leone
    SM = "SM"  # San Marino
    SN = "SN"  # Senegal
    SO = "SO"  # Somalia
    SR = "SR"  # Suriname
    SS = "SS"  # South Sudan
    ST = "ST"  # Sao Tome and Principe
    SV = "SV"  # El Salvador
    SX = "SX"  # Sint Maarten (Dutch part)
    SY = "SY"  # Syrian Arab Republic
    SZ = "SZ"  # Eswatini
    TC = "TC"  # Turks and Caicos Islands
    TD = "TD"  # Chad
    TF = "TF"  # French Southern Territories
    TG = "TG"  # Togo
    TH = "TH"  # Thailand
    TJ = "TJ"  # Tajikistan
    TK = "TK"  # Tokelau
    TL = "TL"  # Timor-Leste
    TM = "TM"  # Turkmenistan
    TN = "TN"  # Tunisia
    TO = "TO"  # Tonga
    TR = "TR"  # Turkey
    TT = "TT"  # Trinidad and Tobago
    TV = "TV"  # Tuvalu
    TW = "TW"  # Taiwan, Province of China
    TZ = "TZ"  # Tanzania, United Republic of
    UA = "UA"  # Ukraine
    UG = "UG"  # Uganda
    UM = "UM"  # United States Minor Outlying Islands
    US = "US"  # United States of America
    UY = "UY"  # Uruguay
    UZ = "UZ"  # Uzbekistan
    VA = "VA"  # Holy See
    VC = "VC"  # Saint Vincent and the Grenadines
    VE = "VE"  # Venezuela (Bolivarian Republic of)
    VG = "VG"  # Virgin Islands (British)
    VI = "VI"  # Virgin Islands (U.S.)
    VN = "VN"  # Viet Nam
    VU = "VU"  # Vanuatu
    WF = "WF"  # Wallis and Futuna
    WS = "WS"  # Samoa
    YE = "YE"  # Yemen
    YT = "YT"  # Mayotte
    ZA = "ZA"  # South Africa
    ZM = "ZM"  # Zambia
    ZW = "ZW"  # Zimbabwe

class LanguageCode(Enum):
    """Two-letter language codes (ISO 639-1)"""
    AA = "aa"  # Afar
    AB = "ab"  # Abkhazian
    AE = "ae"  # Avestan
    AF = "af"  # Afrikaans
    AK = "ak"  # Akan
    AM = "am"  # Amharic
    AN = "an"  # Aragonese
    AR = "ar"  # Arabic
    AS = "as"  # Assamese
    AV = "av"  # Avaric
    AY = "ay"  # Aymara
    AZ = "az"  # Azerbaijani
    BA = "ba"  # Bashkir
    BE = "be"  # Belarusian
    BG = "bg"  # Bulgarian
    BI = "bi"  # Bislama
    BM = "bm"  # Bambara
    BN = "bn"  # Bengali
    BO = "bo"  # Tibetan
    BR = "br"  # Breton
    BS = "bs"  # Bosnian
    CA = "ca"  # Catalan
    CE = "ce"  # Chechen
    CH = "ch"  # Chamorro
    CO = "co"  # Corsican
    CR = "cr"  # Cree
    CS = "cs"  # Czech
    CU = "cu"  # Church Slavic
    CV = "cv"  # Chuvash
    CY = "cy"  # Welsh
    DA = "da"  # Danish
    DE = "de"  # German
    DV = "dv"  # Divehi
    DZ = "dz"  # Dzongkha
    EE = "ee"  # Ewe
    EL = "el"  # Greek
    EN = "en"  # English
    EO = "eo"  # Esperanto
    ES = "es"  # Spanish
    ET = "et"  # Estonian
    EU = "eu"  # Basque
    FA = "fa"  # Persian
    FF = "ff"  # Fulah
    FI = "fi"  # Finnish
    FJ = "fj"  # Fijian
    FO = "fo"  # Faroese
    FR = "fr"  # French
    FY = "fy"  # Western Frisian
    GA = "ga"  # Irish
    GD = "gd"  # Gaelic
    GL = "gl"  # Galician
    GN = "gn"  # Guarani
    GU = "gu"  # Gujarati
    GV = "gv"  # Manx
    HA = "ha"  # Hausa
    HE = "he"  # Hebrew
    HI = "hi"  # Hindi
    HO = "ho"  # Hiri Motu
    HR = "hr"  # Croatian
    HT = "ht"  # Haitian
    HU = "hu"  # Hungarian
    HY = "hy"  # Armenian
    HZ = "hz"  # Herero
    IA = "ia"  # Interlingua
    ID = "id"  # Indonesian
    IE = "ie"  # Interlingue
    IG = "ig"  # Igbo
    II = "ii"  # Sichuan Yi
    IK = "ik"  # Inupiaq
    IO = "io"  # Ido
    IS = "is"  # Icelandic
    IT = "it"  # Italian
    IU = "iu"  # Inuktitut
    JA = "ja"  # Japanese
    JV = "jv"  # Javanese
    KA = "ka"  # Georgian
    KG = "kg"  # Kongo
    KI = "ki"  # Kikuyu
    KJ = "kj"  # Kuanyama
    KK = "kk"  # Kazakh
    KL = "kl"  # Kalaallisut
    KM = "km"  # Central Khmer
    KN = "kn"  # Kannada
    KO = "ko"  # Korean
    KR = "kr"  # Kanuri
    KS = "ks"  # Kashmiri
    KU = "ku"  # Kurdish
    KV = "kv"  # Komi
    KW = "kw"  # Cornish
    KY = "ky"  # Kirghiz
    LA = "la"  # Latin
    LB = "lb"  # Luxembourgish
    LG = "lg"  # Ganda
    LI = "li"  # Limburgan
    LN = "ln"  # Lingala
    LO = "lo"  # Lao
    LT = "lt"  # Lithuanian
    LU = "lu"  # Luba-Katanga
    LV = "lv"  # Latvian
    MG = "mg"  # Malagasy
    MH = "mh"  # Marshallese
    MI = "mi"  # Maori
    MK = "mk"  # Macedonian
    ML = "ml"  # Malayalam
    MN = "mn"  # Mongolian
    MR = "mr"  # Marathi
    MS = "ms"  # Malay
    MT = "mt"  # Maltese
    MY = "my"  # Burmese
    NA = "na"  # Nauru
    NB = "nb"  # Norwegian Bokmål
    ND = "nd"  # North Ndebele
    NE = "ne"  # Nepali
    NG = "ng"  # Ndonga
    NL = "nl"  # Dutch
    NN = "nn"  # Norwegian Nynorsk
    NO = "no"  # Norwegian
    NR = "nr"  # South Ndebele
    NV = "nv"  # Navajo
    NY = "ny"  # Chichewa
    OC = "oc"  # Occitan
    OJ = "oj"  # Ojibwa
    OM = "om"  # Oromo
    OR = "or"  # Oriya
    OS = "os"  # Ossetian
    PA = "pa"  # Punjabi
    PI = "pi"  # Pali
    PL = "pl"  # Polish
    PS = "ps"  # Pashto
    PT = "pt"  # Portuguese
    QU = "qu"  # Quechua
    RM = "rm"  # Romansh
    RN = "rn"  # Rundi
    RO = "ro"  # Romanian
    RU = "ru"  # Russian
    RW = "rw"  # Kinyarwanda
    SA = "sa"  # Sanskrit
    SC = "sc"  # Sardinian
    SD = "sd"  # Sindhi
    SE = "se"  # Northern Sami
    SG = "sg"  # Sango
    SI = "si"  # Sinhala
    SK = "sk"  # Slovak
    SL = "sl"  # Slovenian
    SM = "sm"  # Samoan
    SN = "sn"  # Shona
    SO = "so"  # Somali
    SQ = "sq"  # Albanian
    SR = "sr"  # Serbian
    SS = "ss"  # Swati
    ST = "st"  # Southern Sotho
    SU = "su"  # Sundanese
    SV = "sv"  # Swedish
    SW = "sw"  # Swahili
    TA = "ta"  # Tamil
    TE = "te"  # Telugu
    TG = "tg"  # Tajik
    TH = "th"  # Thai
    TI = "ti"  # Tigrinya
    TK = "tk"  # Turkmen
    TL = "tl"  # Tagalog
    TN = "tn"  # Tswana
    TO = "to"  # Tonga
    TR = "tr"  # Turkish
    TS = "ts"  # Tsonga
    TT = "tt"  # Tatar
    TW = "tw"  # Twi
    TY = "ty"  # Tahitian
    UG = "ug"  # Uighur
    UK = "uk"  # Ukrainian
    UR = "ur"  # Urdu
    UZ = "uz"  # Uzbek
    VE = "ve"  # Venda
    VI = "vi"  # Vietnamese
    VO = "vo"  # Volapük
    WA = "wa"  # Walloon
    WO = "wo"  # Wolof
    XH = "xh"  # Xhosa
    YI = "yi"  # Yiddish
    YO = "yo"  # Yoruba
    ZA = "za"  # Zhuang
    ZH = "zh"  # Chinese
    ZU = "zu"  # Zulu
