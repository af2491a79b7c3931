class CategorySlugs:
    MUSIC: str = "music"
    BODILY_KINESTHETIC: str = "bodily_kinesthetic"
    EXISTENTIAL: str = "existential"
    SPATIAL: str = "spatial"
    NATURALISTIC: str = "naturalistic"
    SCHOOL_COMMUNITY: str = "school_community"
    SOCIETY: str = "society"
    LIFESKILLS: str = "lifeskills"
    LINGUISTIC: str = "linguistic"
    MATHEMATICAL_LOGICAL: str = "mathematical_logical"
    INTRAPERSONAL: str = "intrapersonal"
    INTERPERSONAL: str = "interpersonal"
    ATTENDANCE: str = "attendance"

    @classmethod
    def all(cls) -> list[str]:
        return [cls.MUSIC,
                cls.BODILY_KINESTHETIC,
                cls.EXISTENTIAL,
                cls.SPATIAL,
                cls.NATURALISTIC,
                cls.SCHOOL_COMMUNITY,
                cls.SOCIETY,
                cls.LIFESKILLS,
                cls.LINGUISTIC,
                cls.MATHEMATICAL_LOGICAL,
                cls.INTRAPERSONAL,
                cls.INTERPERSONAL,
                cls.ATTENDANCE,]

    @classmethod
    def is_valid(cls, slug: str) -> bool:
        return slug in cls.all()
