"""Multilingual keyword sets and the adult-domain blocklist used by the content filter.

All collections are immutable and loaded once per process. Entries are stored
lowercase. Two- and three-letter medical abbreviations (``std``, ``sti``,
``ist``, ``its`` ...) are deliberately absent from the safe contexts: safe
contexts match as plain substrings and those fragments occur inside ordinary
words.
"""

from types import MappingProxyType
from typing import FrozenSet, Mapping, Tuple

SAFE_CONTEXTS: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "en": (
            "sex education", "sexual education", "sex ed",
            "sex chromosome", "sex chromosomes", "biological sex",
            "sex determination", "sex differences",
            "sexual health", "sexual wellness", "sexual medicine",
            "sex therapy", "sexual counseling",
            "breast cancer", "breast feeding", "breastfeeding",
            "breast examination", "breast health", "breast screening",
            "reproductive health", "reproductive system", "reproduction biology",
            "human sexuality", "sexuality education",
            "gender studies", "gender identity",
            "puberty education", "adolescent development",
            "sexually transmitted",
            "contraception", "family planning",
            "pregnancy", "prenatal", "postnatal",
            "sexual assault prevention", "sexual harassment",
            "sex trafficking prevention", "human trafficking",
        ),
        "ar": (
            "التربية الجنسية", "الثقافة الجنسية", "التوعية الجنسية",
            "الكروموسومات الجنسية", "الجنس البيولوجي",
            "الصحة الجنسية", "الطب الجنسي",
            "سرطان الثدي", "الرضاعة الطبيعية", "فحص الثدي", "صحة الثدي",
            "الصحة الإنجابية", "الجهاز التناسلي",
            "الأمراض المنقولة جنسيا",
            "منع الحمل", "تنظيم الأسرة",
            "قبل الولادة", "بعد الولادة",
            "التحرش الجنسي", "منع الاتجار بالبشر",
        ),
        "fr": (
            "éducation sexuelle", "chromosome sexuel", "sexe biologique",
            "santé sexuelle", "cancer du sein", "allaitement",
            "santé reproductive", "identité de genre",
            "maladie sexuellement transmissible",
            "contraception", "planification familiale", "grossesse",
        ),
        "es": (
            "educación sexual", "cromosoma sexual", "sexo biológico",
            "salud sexual", "cáncer de mama", "lactancia materna",
            "salud reproductiva", "identidad de género",
            "enfermedad de transmisión sexual",
            "anticoncepción", "planificación familiar", "embarazo",
        ),
        "de": (
            "sexualerziehung", "sexualaufklärung", "biologisches geschlecht",
            "sexuelle gesundheit", "brustkrebs", "stillen",
            "brustuntersuchung", "reproduktive gesundheit",
            "sexuell übertragbare krankheit",
            "verhütung", "familienplanung", "schwangerschaft",
        ),
        "ru": (
            "половое воспитание", "сексуальное образование",
            "биологический пол", "сексуальное здоровье",
            "рак груди", "грудное вскармливание",
            "репродуктивное здоровье", "половое созревание",
            "контрацепция", "планирование семьи", "беременность",
        ),
        "tr": (
            "cinsel eğitim", "biyolojik cinsiyet", "cinsel sağlık",
            "meme kanseri", "emzirme", "üreme sağlığı",
            "doğum kontrolü", "aile planlaması", "hamilelik",
        ),
        "it": (
            "educazione sessuale", "sesso biologico", "salute sessuale",
            "cancro al seno", "allattamento", "salute riproduttiva",
            "contraccezione", "pianificazione familiare", "gravidanza",
        ),
        "pt": (
            "educação sexual", "sexo biológico", "saúde sexual",
            "câncer de mama", "amamentação", "saúde reprodutiva",
            "contracepção", "planejamento familiar", "gravidez",
        ),
        "fa": ("آموزش جنسی", "سلامت جنسی", "سرطان سینه", "سلامت باروری", "بارداری"),
        "ur": ("جنسی تعلیم", "جنسی صحت", "چھاتی کا کینسر", "تولیدی صحت"),
        "hi": ("यौन शिक्षा", "यौन स्वास्थ्य", "स्तन कैंसर", "प्रजनन स्वास्थ्य", "गर्भावस्था"),
        "ja": ("性教育", "性染色体", "性の健康", "乳がん", "生殖健康", "妊娠"),
        "zh": ("性教育", "性染色体", "性健康", "乳腺癌", "生殖健康", "怀孕"),
        "ko": ("성교육", "성 교육", "성염색체", "성 건강", "유방암", "생식 건강", "임신"),
        "pl": ("edukacja seksualna", "zdrowie seksualne", "rak piersi", "ciąża"),
        "nl": ("seksuele voorlichting", "seksuele gezondheid", "borstkanker", "zwangerschap"),
        "sv": ("sexualundervisning", "sexuell hälsa", "bröstcancer", "graviditet"),
        "uk": ("статеве виховання", "рак грудей", "вагітність"),
        "el": ("σεξουαλική αγωγή", "σεξουαλική υγεία", "καρκίνος του μαστού", "εγκυμοσύνη"),
        "th": ("การศึกษาทางเพศ", "สุขภาพทางเพศ", "มะเร็งเต้านม", "การตั้งครรภ์"),
        "vi": ("giáo dục giới tính", "sức khỏe tình dục", "ung thư vú", "mang thai"),
        "id": ("pendidikan seksual", "kesehatan seksual", "kanker payudara", "kehamilan"),
        "he": ("חינוך מיני", "בריאות מינית", "סרטן שד", "הריון"),
    }
)

BLOCKED_KEYWORDS: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "en": (
            "porn", "pornography", "xxx", "adult video", "adult videos",
            "sex video", "sex videos", "sex movie", "sex movies",
            "nude", "nudes", "naked", "nsfw",
            "erotic", "erotica", "hentai", "doujin",
            "camgirl", "cam girl", "webcam girl",
            "escort", "escorts", "hookup", "hook up", "one night stand",
            "sexual content", "adult content",
            "sex chat", "sex site", "sex sites", "porn site", "porn sites",
            "adult site", "adult sites", "milf", "gilf",
            "amateur porn", "amateur sex", "live sex", "live cam",
            "free porn", "free sex", "download porn", "watch porn",
            "teen porn", "teen sex", "lesbian porn", "gay porn",
            "anal", "oral sex", "blowjob", "masturbation", "masturbate",
            "orgasm", "viagra", "cialis", "penis enlargement",
            "sex toy", "sex toys", "vibrator",
            "strip club", "stripclub", "stripper",
            "brothel", "red light district",
        ),
        "ar": (
            "إباحي", "اباحي", "إباحية", "اباحية",
            "جنس", "سكس", "نيك",
            "فيديو إباحي", "أفلام إباحية",
            "عاري", "عارية", "عراة",
            "محتوى للكبار", "محتوى بالغين",
            "مواقع إباحية", "موقع إباحي", "دردشة جنسية",
            "فاحشة", "عاهرة",
        ),
        "fr": (
            "porno", "pornographie", "vidéo adulte", "vidéo sexe",
            "film sexe", "nue", "nues", "érotique", "contenu adulte",
            "site porno", "chat sexe", "sexe gratuit", "porno gratuit",
        ),
        "es": (
            "pornografía", "video adulto", "video sexual", "película sexual",
            "desnudo", "desnuda", "desnudos", "erótico", "erótica",
            "contenido adulto", "sitio porno", "chat sexual",
            "sexo gratis", "porno gratis",
        ),
        "de": (
            "pornografie", "erwachsenenvideo", "sexvideo", "sexfilm",
            "nackt", "erotisch", "erwachseneninhalt", "pornoseite",
            "gratis porno", "gratis sex",
        ),
        "ru": (
            "порно", "порнография", "видео для взрослых", "секс видео",
            "голый", "голая", "обнаженный", "эротика", "эротический",
            "контент для взрослых", "секс чат", "бесплатное порно",
        ),
        "tr": (
            "pornografi", "yetişkin video", "seks video", "seks filmi",
            "çıplak", "erotik", "yetişkin içerik", "seks sohbet", "bedava porno",
        ),
        "it": (
            "pornografia", "video sesso", "nudo", "nuda",
            "contenuto adulto", "sito porno", "chat sesso",
        ),
        "pt": (
            "pornô", "vídeo adulto", "vídeo sexual", "nua",
            "conteúdo adulto", "site pornô", "pornô grátis",
        ),
        "fa": ("پورن", "محتوای بزرگسال", "ویدیو جنسی", "برهنه"),
        "ur": ("فحش", "عریاں", "جنسی ویڈیو", "بالغ مواد"),
        "hi": ("अश्लील", "पोर्न", "यौन वीडियो", "नग्न", "वयस्क सामग्री"),
        "ja": ("ポルノ", "アダルト", "セックス動画", "ヌード", "エロ", "成人向け"),
        "zh": ("色情", "性爱视频", "裸体", "成人内容"),
        "ko": ("포르노", "섹스 비디오", "누드", "성인 콘텐츠", "야동", "성인 사이트"),
        "pl": ("film dla dorosłych", "nagi", "naga", "treści dla dorosłych", "darmowe porno"),
        "nl": ("naakt", "inhoud voor volwassenen", "seks video", "gratis porno"),
        "sv": ("vuxenvideo", "naken", "erotisk", "vuxeninnehåll"),
        "uk": ("порнографія", "відео для дорослих", "контент для дорослих", "секс відео"),
        "el": ("πορνό", "πορνογραφία", "βίντεο ενηλίκων", "περιεχόμενο ενηλίκων"),
        "th": ("หนังโป๊", "วิดีโอผู้ใหญ่", "เปลือย", "เนื้อหาผู้ใหญ่", "วิดีโอเซ็กส์"),
        "vi": ("phim khiêu dâm", "phim người lớn", "video người lớn", "khỏa thân"),
        "id": ("video dewasa", "telanjang", "konten dewasa", "video seks"),
        "he": ("פורנו", "פורנוגרפיה", "וידאו למבוגרים", "עירום", "תוכן למבוגרים"),
    }
)

ADULT_DOMAINS: FrozenSet[str] = frozenset(
    {
        # tube sites
        "pornhub.com", "pornhub.org", "pornhub.net", "xvideos.com", "xvideos.es",
        "xvideos.red", "xnxx.com", "xnxx.tv", "redtube.com", "redtube.net",
        "youporn.com", "xhamster.com", "xhamster.desi", "tube8.com",
        "spankwire.com", "keezmovies.com", "extremetube.com", "porn.com",
        "beeg.com", "drtuber.com", "pornerbros.com", "nuvid.com", "pornhd.com",
        "txxx.com", "hdzog.com", "spankbang.com", "eporner.com", "tnaflix.com",
        "motherless.com", "hclips.com", "porntrex.com", "daftsex.com",
        "noodlemagazine.com", "pornpics.com", "sxyprn.com", "porn.xyz",
        # cams and chat
        "chaturbate.com", "livejasmin.com", "stripchat.com", "bongacams.com",
        "cam4.com", "camsoda.com", "myfreecams.com", "livesex.com",
        "sexchat.com", "webcamsex.com",
        # studios and paysites
        "brazzers.com", "realitykings.com", "bangbros.com", "naughtyamerica.com",
        "mofos.com", "digitalplayground.com", "penthouse.com", "hustler.com",
        "metart.com", "babes.com", "twistys.com", "mydirtyhobby.com",
        # hentai and comics
        "nhentai.net", "hentaihaven.xxx", "hanime.tv", "rule34.xxx",
        "e-hentai.org", "hentaigame.xxx", "porncomics.com",
        # regional
        "jable.tv", "javhd.com", "javmost.com", "tokyomotion.net", "avgle.com",
        "vjav.com", "desixnxx.net", "indianpornvideos.com", "desitube.com",
        "brasileirinhas.com.br", "cumlouder.com", "sexu.com",
    }
)
