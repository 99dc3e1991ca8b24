# storefront/data/seed.py
from storefront.domain.schemas import LanguageCreate, ProductCreate
from storefront.services.catalog_service import CatalogService
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

_IMG = "https://images.unsplash.com/photo-{}?ixlib=rb-1.2.1&auto=format&fit=crop&w=800&q=80"

LANGUAGES = [
    {"code": "hi", "name": "Hindi", "native_name": "हिन्दी", "description": "Most popular language"},
    {"code": "bn", "name": "Bengali", "native_name": "বাংলা", "description": "Full character support"},
    {"code": "ta", "name": "Tamil", "native_name": "தமிழ்", "description": "Classical language"},
    {"code": "te", "name": "Telugu", "native_name": "తెలుగు", "description": "Complete layout"},
    {"code": "kn", "name": "Kannada", "native_name": "ಕನ್ನಡ", "description": "Special edition available"},
    {"code": "ml", "name": "Malayalam", "native_name": "മലയാളം", "description": "Premium layout"},
    {"code": "pa", "name": "Punjabi", "native_name": "ਪੰਜਾਬੀ", "description": "Gurumukhi script"},
    {"code": "mr", "name": "Marathi", "native_name": "मराठी", "description": "Devanagari script"},
    {"code": "gu", "name": "Gujarati", "native_name": "ગુજરાતી", "description": "Full support"},
    {"code": "ur", "name": "Urdu", "native_name": "اردو", "description": "Right-to-left support"},
    {"code": "or", "name": "Odia", "native_name": "ଓଡ଼ିଆ", "description": "Eastern Indian language"},
]

# prices in paise: 649900 == Rs 6,499.00
PRODUCTS = [
    {
        "name": "Hindi Keyboard Pro",
        "slug": "hindi-keyboard-pro",
        "description": "Mechanical keyboard with Hindi language layout and RGB lighting. "
        "Perfect for daily typing and programming.",
        "price": 649900,
        "category": "keyboard",
        "image_url": _IMG.format("1595225476474-87563907a212"),
        "rating": 4.8,
        "review_count": 124,
        "is_featured": True,
        "languages_supported": ["hi", "en"],
    },
    {
        "name": "Bengali Mech Keyboard",
        "slug": "bengali-mech-keyboard",
        "description": "Premium mechanical keyboard with Bengali character support. "
        "Features Cherry MX switches for the ultimate typing experience.",
        "price": 719900,
        "category": "keyboard",
        "image_url": _IMG.format("1618384887929-16ec33fab9ef"),
        "rating": 4.0,
        "review_count": 78,
        "is_featured": True,
        "is_new_arrival": True,
        "languages_supported": ["bn", "en"],
    },
    {
        "name": "Tamil-English Combo",
        "slug": "tamil-english-combo",
        "description": 'Keyboard and 24" display combo with Tamil language support. '
        "Perfect for professionals who work in dual languages.",
        "price": 1199900,
        "category": "display_combo",
        "image_url": _IMG.format("1542728928-1413d1894ed1"),
        "rating": 5.0,
        "review_count": 42,
        "is_featured": True,
        "languages_supported": ["ta", "en"],
    },
    {
        "name": "Kerala Special Edition",
        "slug": "kerala-special-edition",
        "description": "Special edition keyboard designed specifically for Malayalam typing. "
        "Features authentic Malayalam script layout.",
        "price": 899900,
        "category": "keyboard",
        "image_url": _IMG.format("1595044426077-d36d9236d54a"),
        "rating": 4.7,
        "review_count": 56,
        "languages_supported": ["ml", "en"],
    },
    {
        "name": "Telugu Premium Keyboard",
        "slug": "telugu-premium-keyboard",
        "description": "Premium mechanical keyboard with Telugu character support. "
        "Designed for professional writers and content creators.",
        "price": 779900,
        "category": "keyboard",
        "image_url": _IMG.format("1587829741301-dc798b83add3"),
        "rating": 4.6,
        "review_count": 37,
        "languages_supported": ["te", "en"],
    },
    {
        "name": "Punjabi Wireless Keyboard",
        "slug": "punjabi-wireless-keyboard",
        "description": "Wireless mechanical keyboard with Punjabi language support. Perfect for "
        "those who need mobility without compromising on typing experience.",
        "price": 599900,
        "category": "keyboard",
        "image_url": _IMG.format("1511467687858-23d96c32e4ae"),
        "rating": 4.2,
        "review_count": 23,
        "languages_supported": ["pa", "en"],
    },
    {
        "name": "Gujarati Display Combo",
        "slug": "gujarati-display-combo",
        "description": "Keyboard and display combo with Gujarati language support. "
        'Features a 27" 4K monitor for the ultimate viewing experience.',
        "price": 1249900,
        "category": "display_combo",
        "image_url": _IMG.format("1616763355548-1b606f439f86"),
        "rating": 4.4,
        "review_count": 19,
        "languages_supported": ["gu", "en"],
    },
    {
        "name": "Kannada Gaming Keyboard",
        "slug": "kannada-gaming-keyboard",
        "description": "Mechanical gaming keyboard with Kannada language support. Features RGB "
        "lighting and programmable macros for the ultimate gaming experience.",
        "price": 829900,
        "category": "keyboard",
        "image_url": _IMG.format("1623126908029-58cb08a2b272"),
        "rating": 4.9,
        "review_count": 31,
        "is_new_arrival": True,
        "languages_supported": ["kn", "en"],
    },
    {
        "name": "Marathi Pro Keyboard",
        "slug": "marathi-pro-keyboard",
        "description": "Professional grade keyboard with Marathi language support. "
        "Perfect for content creators and writers.",
        "price": 749900,
        "category": "keyboard",
        "image_url": _IMG.format("1561112078-7d24e04c3407"),
        "rating": 4.5,
        "review_count": 28,
        "languages_supported": ["mr", "en"],
    },
    {
        "name": "Odia Classic Keyboard",
        "slug": "odia-classic-keyboard",
        "description": "Classic mechanical keyboard with Odia language support. "
        "Features Cherry MX Brown switches for a tactile typing experience.",
        "price": 699900,
        "category": "keyboard",
        "image_url": _IMG.format("1587829741301-dc798b83add3"),
        "rating": 4.3,
        "review_count": 17,
        "languages_supported": ["or", "en"],
    },
    {
        "name": "Multi-Language Premium Combo",
        "slug": "multi-language-premium-combo",
        "description": 'Premium keyboard and 32" 4K display combo with support for all major '
        "Indian languages. The ultimate setup for multilingual professionals.",
        "price": 1899900,
        "category": "display_combo",
        "image_url": _IMG.format("1547394765-185e1e68f34e"),
        "rating": 4.9,
        "review_count": 14,
        "is_new_arrival": True,
        "languages_supported": ["hi", "bn", "ta", "te", "kn", "ml", "pa", "mr", "gu", "ur", "or", "en"],
    },
    {
        "name": "Urdu Wireless Keyboard",
        "slug": "urdu-wireless-keyboard",
        "description": "Wireless mechanical keyboard with Urdu language support "
        "and right-to-left text input capabilities.",
        "price": 749900,
        "category": "keyboard",
        "image_url": _IMG.format("1595225476474-87563907a212"),
        "rating": 4.4,
        "review_count": 22,
        "languages_supported": ["ur", "en"],
    },
]


def seed(catalog: CatalogService) -> bool:
    # not forcing: only seed if empty
    if not catalog.is_empty():
        logger.info("Catalog already has data, skipping seed")
        return False

    for data in LANGUAGES:
        catalog.create_language(LanguageCreate(**data))
    for data in PRODUCTS:
        catalog.create(ProductCreate(**data))

    logger.info(f"Seeded catalog with {len(LANGUAGES)} languages and {len(PRODUCTS)} products")
    return True
