from typing import Final

TO_TASTE: Final[str] = "to taste"

METADATA_VERSION: Final[str] = "1.0"
PLANS_DESCRIPTION: Final[str] = "Weekly meal plans tracking ISO week dates and selected recipes"
RATINGS_DESCRIPTION: Final[str] = "Recipe ratings from family members"

MIN_SCORE: Final[int] = 1
MAX_SCORE: Final[int] = 5

ALLOWED_UPLOAD_TYPES: Final[tuple] = (
    'image/jpeg', 'image/png', 'image/gif', 'image/webp', 'application/pdf'
)
PDF_MIME_TYPE: Final[str] = 'application/pdf'
UPLOAD_FOLDERS: Final[tuple] = ('images', 'pdfs', 'processed')
