"""Static geography tables: country names, default languages and state major cities"""

from types import MappingProxyType
from typing import Mapping

# lowercase country name or alias -> ISO-3166 alpha-2
COUNTRY_CODES: Mapping[str, str] = MappingProxyType(
    {
        "united states": "us", "united states of america": "us", "usa": "us",
        "america": "us", "united kingdom": "gb", "uk": "gb",
        "great britain": "gb", "england": "gb", "canada": "ca",
        "australia": "au", "new zealand": "nz", "ireland": "ie",
        "germany": "de", "france": "fr", "spain": "es", "italy": "it",
        "portugal": "pt", "netherlands": "nl", "belgium": "be",
        "switzerland": "ch", "austria": "at", "sweden": "se", "norway": "no",
        "denmark": "dk", "finland": "fi", "poland": "pl", "greece": "gr",
        "czech republic": "cz", "czechia": "cz", "hungary": "hu",
        "romania": "ro", "ukraine": "ua", "russia": "ru", "turkey": "tr",
        "japan": "jp", "china": "cn", "india": "in", "pakistan": "pk",
        "bangladesh": "bd", "brazil": "br", "mexico": "mx", "argentina": "ar",
        "chile": "cl", "colombia": "co", "peru": "pe", "egypt": "eg",
        "saudi arabia": "sa", "ksa": "sa", "uae": "ae",
        "united arab emirates": "ae", "qatar": "qa", "kuwait": "kw",
        "bahrain": "bh", "oman": "om", "jordan": "jo", "lebanon": "lb",
        "iraq": "iq", "iran": "ir", "israel": "il", "south korea": "kr",
        "korea": "kr", "thailand": "th", "singapore": "sg", "malaysia": "my",
        "indonesia": "id", "philippines": "ph", "vietnam": "vn",
        "taiwan": "tw", "hong kong": "hk", "south africa": "za",
        "nigeria": "ng", "kenya": "ke", "morocco": "ma", "tunisia": "tn",
        "algeria": "dz", "libya": "ly", "sudan": "sd", "ethiopia": "et",
        "ghana": "gh", "uganda": "ug", "tanzania": "tz", "zimbabwe": "zw",
        "zambia": "zm", "senegal": "sn", "cameroon": "cm", "angola": "ao",
        "ivory coast": "ci", "democratic republic of the congo": "cd",
        "congo": "cg", "rwanda": "rw", "somalia": "so", "mozambique": "mz",
        "madagascar": "mg", "mauritius": "mu",
    }
)

# ISO-3166 alpha-2 -> ISO-639-1 language most searches there are written in
COUNTRY_DEFAULT_LANGUAGE: Mapping[str, str] = MappingProxyType(
    {
        "us": "en", "gb": "en", "ca": "en", "au": "en", "nz": "en", "ie": "en",
        "in": "en", "sg": "en", "za": "en", "ng": "en", "ke": "en", "gh": "en",
        "ph": "en", "pk": "en",
        "de": "de", "at": "de", "ch": "de", "fr": "fr", "be": "fr",
        "sn": "fr", "ci": "fr", "cm": "fr", "cd": "fr",
        "es": "es", "mx": "es", "ar": "es", "cl": "es", "co": "es", "pe": "es",
        "it": "it", "pt": "pt", "br": "pt", "ao": "pt", "mz": "pt",
        "nl": "nl", "se": "sv", "no": "no", "dk": "da", "fi": "fi",
        "pl": "pl", "gr": "el", "cz": "cs", "hu": "hu", "ro": "ro",
        "ua": "uk", "ru": "ru", "tr": "tr",
        "jp": "ja", "cn": "zh", "tw": "zh", "hk": "zh", "kr": "ko",
        "th": "th", "vn": "vi", "id": "id", "my": "ms", "bd": "bn",
        "il": "he", "ir": "fa",
        "eg": "ar", "sa": "ar", "ae": "ar", "qa": "ar", "kw": "ar", "bh": "ar",
        "om": "ar", "jo": "ar", "lb": "ar", "iq": "ar", "ma": "ar", "tn": "ar",
        "dz": "ar", "ly": "ar", "sd": "ar",
    }
)

# US state -> its largest city, used only as an optional upstream location hint
STATE_MAJOR_CITY: Mapping[str, str] = MappingProxyType(
    {
        "texas": "Houston", "california": "Los Angeles", "florida": "Miami",
        "new york": "New York", "illinois": "Chicago",
        "pennsylvania": "Philadelphia", "ohio": "Columbus", "georgia": "Atlanta",
        "north carolina": "Charlotte", "michigan": "Detroit",
        "new jersey": "Newark", "virginia": "Virginia Beach",
        "washington": "Seattle", "arizona": "Phoenix",
        "massachusetts": "Boston", "tennessee": "Nashville",
        "indiana": "Indianapolis", "missouri": "Kansas City",
        "maryland": "Baltimore", "wisconsin": "Milwaukee", "colorado": "Denver",
        "minnesota": "Minneapolis", "south carolina": "Columbia",
        "alabama": "Birmingham", "louisiana": "New Orleans",
        "kentucky": "Louisville", "oregon": "Portland",
        "oklahoma": "Oklahoma City", "connecticut": "Bridgeport",
        "utah": "Salt Lake City", "iowa": "Des Moines", "nevada": "Las Vegas",
        "arkansas": "Little Rock", "mississippi": "Jackson", "kansas": "Wichita",
        "new mexico": "Albuquerque", "nebraska": "Omaha",
        "west virginia": "Charleston", "idaho": "Boise", "hawaii": "Honolulu",
        "new hampshire": "Manchester", "maine": "Portland", "montana": "Billings",
        "rhode island": "Providence", "delaware": "Wilmington",
        "south dakota": "Sioux Falls", "north dakota": "Fargo",
        "alaska": "Anchorage", "vermont": "Burlington", "wyoming": "Cheyenne",
    }
)
