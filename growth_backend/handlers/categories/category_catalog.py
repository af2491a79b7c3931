from typing import List

from .category_registry import CategoryRegistry
from .category_slugs import CategorySlugs
from .schema import CanonicalCategory


# Registry order is the order placeholders are emitted in
DEFAULT_CATEGORIES: List[CanonicalCategory] = [
    CanonicalCategory(
        id=CategorySlugs.MUSIC,
        displayName="Music Intelligence",
        displayNameVariants={"Music intelligence"},
        icon="music-note",
        color="#06B6D4",
        description="Sensitivity to rhythm, pitch, and musical patterns",
    ),
    CanonicalCategory(
        id=CategorySlugs.BODILY_KINESTHETIC,
        displayName="Bodily Kinesthetic Intelligence",
        displayNameVariants={"Bodily kinesthetic intelligence", "Bodily Kinesthetic intelligence"},
        icon="directions-run",
        color="#10B981",
        description="Physical movement and body coordination skills",
    ),
    CanonicalCategory(
        id=CategorySlugs.EXISTENTIAL,
        displayName="Existential Intelligence",
        displayNameVariants={"Existential intelligence"},
        icon="quiz",
        color="#EC4899",
        description="Understanding of existence and philosophical thinking",
    ),
    CanonicalCategory(
        id=CategorySlugs.SPATIAL,
        displayName="Spatial Intelligence",
        displayNameVariants={"Spatial intelligence"},
        icon="3d-rotation",
        color="#8B5A3C",
        description="Visual-spatial processing and artistic abilities",
    ),
    CanonicalCategory(
        id=CategorySlugs.NATURALISTIC,
        displayName="Naturalistic Intelligence",
        displayNameVariants={"Naturalistic intelligence"},
        icon="nature",
        color="#059669",
        description="Understanding of nature and environmental awareness",
    ),
    CanonicalCategory(
        id=CategorySlugs.SCHOOL_COMMUNITY,
        displayName="Contribution to School Community",
        displayNameVariants={"Contribution to school Community", "Contribution to school community"},
        icon="school",
        color="#7C3AED",
        description="Active participation in school activities and community",
    ),
    CanonicalCategory(
        id=CategorySlugs.SOCIETY,
        displayName="Contribution to Society",
        displayNameVariants={"Contribution to society"},
        icon="public",
        color="#DB2777",
        description="Social responsibility and community service",
    ),
    CanonicalCategory(
        id=CategorySlugs.LIFESKILLS,
        displayName="Life Skills Development",
        displayNameVariants={"Life skills development", "Life Skills development"},
        icon="build",
        color="#DC2626",
        description="Development of practical life skills and independence",
    ),
    CanonicalCategory(
        id=CategorySlugs.LINGUISTIC,
        displayName="Linguistic Intelligence",
        displayNameVariants={"Linguistic intelligence"},
        icon="record-voice-over",
        color="#F59E0B",
        description="Language skills and verbal communication",
    ),
    CanonicalCategory(
        id=CategorySlugs.MATHEMATICAL_LOGICAL,
        displayName="Mathematical / Logical Intelligence",
        displayNameVariants={"Mathematical / logical intelligence", "Mathematical / Logical intelligence"},
        icon="calculate",
        color="#EF4444",
        description="Mathematical reasoning and logical thinking",
    ),
    CanonicalCategory(
        id=CategorySlugs.INTRAPERSONAL,
        displayName="Intrapersonal Intelligence",
        displayNameVariants={"Intrapersonal intelligence"},
        icon="psychology",
        color="#8B5CF6",
        description="Self-awareness and understanding of one's own emotions",
    ),
    CanonicalCategory(
        id=CategorySlugs.INTERPERSONAL,
        displayName="Interpersonal Intelligence",
        displayNameVariants={"Interpersonal intelligence"},
        icon="groups",
        color="#3B82F6",
        description="Understanding and interacting effectively with others",
    ),
    CanonicalCategory(
        id=CategorySlugs.ATTENDANCE,
        displayName="Attendance and Punctuality",
        displayNameVariants={"Attendance and punctuality"},
        icon="schedule",
        color="#0891B2",
        description="Regular attendance and punctuality to school",
    ),
]


def build_default_registry() -> CategoryRegistry:
    return CategoryRegistry(DEFAULT_CATEGORIES)
