"""Static source catalog: popular site-scoped sources per intent and market.

``GLOBAL_SOURCES`` covers every intent; ``COUNTRY_SOURCES`` overrides single
intents for a few markets. ``BRAND_GLOBAL_DOMAINS`` maps country storefronts
to the brand's global domain for the zero-result fallback.
"""

from types import MappingProxyType
from typing import FrozenSet, Mapping, Tuple

from novasearch.domain.models.search import Intent, Source


def _sources(*entries: Tuple[str, str, str]) -> Tuple[Source, ...]:
    return tuple(Source(id=id_, name=name, site=site) for id_, name, site in entries)


GLOBAL_SOURCES: Mapping[Intent, Tuple[Source, ...]] = MappingProxyType(
    {
        Intent.SHOPPING: _sources(
            ("amazon", "Amazon", "amazon.com"),
            ("ebay", "eBay", "ebay.com"),
            ("aliexpress", "AliExpress", "aliexpress.com"),
            ("walmart", "Walmart", "walmart.com"),
            ("etsy", "Etsy", "etsy.com"),
        ),
        Intent.NEWS: _sources(
            ("bbc", "BBC", "bbc.com"),
            ("reuters", "Reuters", "reuters.com"),
            ("aljazeera", "Al Jazeera", "aljazeera.com"),
            ("theguardian", "The Guardian", "theguardian.com"),
            ("apnews", "AP News", "apnews.com"),
        ),
        Intent.LEARNING: _sources(
            ("wikipedia", "Wikipedia", "wikipedia.org"),
            ("coursera", "Coursera", "coursera.org"),
            ("khanacademy", "Khan Academy", "khanacademy.org"),
            ("stackoverflow", "Stack Overflow", "stackoverflow.com"),
            ("edx", "edX", "edx.org"),
        ),
        Intent.VIDEOS: _sources(
            ("youtube", "YouTube", "youtube.com"),
            ("vimeo", "Vimeo", "vimeo.com"),
            ("dailymotion", "Dailymotion", "dailymotion.com"),
            ("twitch", "Twitch", "twitch.tv"),
            ("ted", "TED", "ted.com"),
        ),
        Intent.TRAVEL: _sources(
            ("booking", "Booking.com", "booking.com"),
            ("tripadvisor", "Tripadvisor", "tripadvisor.com"),
            ("expedia", "Expedia", "expedia.com"),
            ("airbnb", "Airbnb", "airbnb.com"),
            ("skyscanner", "Skyscanner", "skyscanner.net"),
        ),
        Intent.HEALTH: _sources(
            ("mayoclinic", "Mayo Clinic", "mayoclinic.org"),
            ("webmd", "WebMD", "webmd.com"),
            ("healthline", "Healthline", "healthline.com"),
            ("who", "WHO", "who.int"),
            ("nih", "NIH", "nih.gov"),
        ),
        Intent.TECH: _sources(
            ("github", "GitHub", "github.com"),
            ("stackoverflow", "Stack Overflow", "stackoverflow.com"),
            ("theverge", "The Verge", "theverge.com"),
            ("techcrunch", "TechCrunch", "techcrunch.com"),
            ("arstechnica", "Ars Technica", "arstechnica.com"),
        ),
        Intent.FINANCE: _sources(
            ("bloomberg", "Bloomberg", "bloomberg.com"),
            ("yahoofinance", "Yahoo Finance", "finance.yahoo.com"),
            ("investing", "Investing.com", "investing.com"),
            ("cnbc", "CNBC", "cnbc.com"),
            ("investopedia", "Investopedia", "investopedia.com"),
        ),
        Intent.ENTERTAINMENT: _sources(
            ("imdb", "IMDb", "imdb.com"),
            ("netflix", "Netflix", "netflix.com"),
            ("spotify", "Spotify", "spotify.com"),
            ("rottentomatoes", "Rotten Tomatoes", "rottentomatoes.com"),
            ("soundcloud", "SoundCloud", "soundcloud.com"),
        ),
        Intent.FOOD: _sources(
            ("allrecipes", "Allrecipes", "allrecipes.com"),
            ("foodnetwork", "Food Network", "foodnetwork.com"),
            ("seriouseats", "Serious Eats", "seriouseats.com"),
            ("bbcgoodfood", "BBC Good Food", "bbcgoodfood.com"),
            ("tasty", "Tasty", "tasty.co"),
        ),
        Intent.GENERAL: _sources(
            ("wikipedia", "Wikipedia", "wikipedia.org"),
            ("reddit", "Reddit", "reddit.com"),
            ("quora", "Quora", "quora.com"),
            ("medium", "Medium", "medium.com"),
            ("amazon", "Amazon", "amazon.com"),
        ),
    }
)

COUNTRY_SOURCES: Mapping[str, Mapping[Intent, Tuple[Source, ...]]] = MappingProxyType(
    {
        "us": MappingProxyType(
            {
                Intent.SHOPPING: _sources(
                    ("amazon", "Amazon", "amazon.com"),
                    ("walmart", "Walmart", "walmart.com"),
                    ("target", "Target", "target.com"),
                    ("bestbuy", "Best Buy", "bestbuy.com"),
                    ("ebay", "eBay", "ebay.com"),
                ),
                Intent.NEWS: _sources(
                    ("cnn", "CNN", "cnn.com"),
                    ("nytimes", "NY Times", "nytimes.com"),
                    ("washingtonpost", "Washington Post", "washingtonpost.com"),
                    ("nbcnews", "NBC News", "nbcnews.com"),
                    ("apnews", "AP News", "apnews.com"),
                ),
            }
        ),
        "gb": MappingProxyType(
            {
                Intent.SHOPPING: _sources(
                    ("amazon-uk", "Amazon UK", "amazon.co.uk"),
                    ("ebay-uk", "eBay UK", "ebay.co.uk"),
                    ("argos", "Argos", "argos.co.uk"),
                    ("currys", "Currys", "currys.co.uk"),
                    ("johnlewis", "John Lewis", "johnlewis.com"),
                ),
                Intent.NEWS: _sources(
                    ("bbc", "BBC", "bbc.co.uk"),
                    ("theguardian", "The Guardian", "theguardian.com"),
                    ("telegraph", "The Telegraph", "telegraph.co.uk"),
                    ("independent", "The Independent", "independent.co.uk"),
                    ("skynews", "Sky News", "news.sky.com"),
                ),
            }
        ),
        "sa": MappingProxyType(
            {
                Intent.SHOPPING: _sources(
                    ("noon", "Noon", "noon.com"),
                    ("amazon-sa", "Amazon SA", "amazon.sa"),
                    ("jarir", "Jarir", "jarir.com"),
                    ("extra", "eXtra", "extra.com"),
                    ("namshi", "Namshi", "namshi.com"),
                ),
                Intent.NEWS: _sources(
                    ("okaz", "Okaz", "okaz.com.sa"),
                    ("sabq", "Sabq", "sabq.org"),
                    ("alriyadh", "Al Riyadh", "alriyadh.com"),
                    ("arabnews", "Arab News", "arabnews.com"),
                    ("saudigazette", "Saudi Gazette", "saudigazette.com.sa"),
                ),
            }
        ),
        "ae": MappingProxyType(
            {
                Intent.SHOPPING: _sources(
                    ("noon", "Noon", "noon.com"),
                    ("amazon-ae", "Amazon UAE", "amazon.ae"),
                    ("sharafdg", "Sharaf DG", "sharafdg.com"),
                    ("dubizzle", "Dubizzle", "dubizzle.com"),
                    ("carrefour-ae", "Carrefour UAE", "carrefouruae.com"),
                ),
                Intent.NEWS: _sources(
                    ("gulfnews", "Gulf News", "gulfnews.com"),
                    ("khaleejtimes", "Khaleej Times", "khaleejtimes.com"),
                    ("thenational", "The National", "thenationalnews.com"),
                    ("albayan", "Al Bayan", "albayan.ae"),
                    ("wam", "WAM", "wam.ae"),
                ),
            }
        ),
        "eg": MappingProxyType(
            {
                Intent.SHOPPING: _sources(
                    ("jumia-eg", "Jumia Egypt", "jumia.com.eg"),
                    ("amazon-eg", "Amazon Egypt", "amazon.eg"),
                    ("noon", "Noon", "noon.com"),
                    ("carrefour-eg", "Carrefour Egypt", "carrefouregypt.com"),
                    ("btech", "B.TECH", "b-tech.com.eg"),
                ),
                Intent.NEWS: _sources(
                    ("ahram", "Al-Ahram", "ahram.org.eg"),
                    ("youm7", "Youm7", "youm7.com"),
                    ("masrawy", "Masrawy", "masrawy.com"),
                    ("almasryalyoum", "Al-Masry Al-Youm", "almasryalyoum.com"),
                    ("shorouk", "Shorouk News", "shorouknews.com"),
                ),
            }
        ),
        "in": MappingProxyType(
            {
                Intent.SHOPPING: _sources(
                    ("amazon-in", "Amazon India", "amazon.in"),
                    ("flipkart", "Flipkart", "flipkart.com"),
                    ("myntra", "Myntra", "myntra.com"),
                    ("ajio", "AJIO", "ajio.com"),
                    ("croma", "Croma", "croma.com"),
                ),
                Intent.NEWS: _sources(
                    ("timesofindia", "Times of India", "timesofindia.indiatimes.com"),
                    ("hindustantimes", "Hindustan Times", "hindustantimes.com"),
                    ("ndtv", "NDTV", "ndtv.com"),
                    ("thehindu", "The Hindu", "thehindu.com"),
                    ("indianexpress", "Indian Express", "indianexpress.com"),
                ),
            }
        ),
    }
)

# country storefront -> brand's global domain
BRAND_GLOBAL_DOMAINS: Mapping[str, str] = MappingProxyType(
    {
        "amazon.sa": "amazon.com",
        "amazon.ae": "amazon.com",
        "amazon.eg": "amazon.com",
        "amazon.in": "amazon.com",
        "amazon.co.uk": "amazon.com",
        "amazon.de": "amazon.com",
        "amazon.fr": "amazon.com",
        "amazon.co.jp": "amazon.com",
        "ebay.co.uk": "ebay.com",
        "ebay.de": "ebay.com",
        "jumia.com.eg": "jumia.com",
        "carrefouruae.com": "carrefour.com",
        "carrefourksa.com": "carrefour.com",
        "carrefouregypt.com": "carrefour.com",
        "bbc.co.uk": "bbc.com",
        "ikea.sa": "ikea.com",
        "ikea.ae": "ikea.com",
    }
)

# public suffixes with two labels, treated as one ccTLD by the fallback heuristic
COMPOUND_CCTLDS: FrozenSet[str] = frozenset(
    {
        "co.uk", "org.uk", "com.sa", "org.sa", "com.eg", "org.eg", "co.in",
        "com.au", "co.nz", "co.jp", "co.kr", "com.br", "com.mx", "com.ar",
        "co.za", "com.tr", "com.sg", "com.my", "com.pk", "com.ng", "com.tw",
        "com.hk", "co.id", "com.ph", "com.vn", "co.il",
    }
)

# two-letter TLDs used as generic names, never as country storefronts
GENERIC_TWO_LETTER_TLDS: FrozenSet[str] = frozenset(
    {"tv", "io", "me", "co", "ai", "fm", "gg", "ly", "to", "cc", "ws", "am", "so"}
)

# platforms with dedicated tabs elsewhere, never offered as domain tiles
PLATFORM_EXCLUSIONS: FrozenSet[str] = frozenset(
    {
        "google", "youtube", "facebook", "twitter", "x", "instagram",
        "tiktok", "reddit", "linkedin", "pinterest",
    }
)
