"""Fixed vocabularies shared by tagging, query parsing and the API layer."""


class Category:
    """Category taxonomy, in priority order."""
    TOYS = "toys"
    GAMES_PUZZLES = "games-puzzles"
    BOOKS = "books"
    KITCHEN = "kitchen"
    HOME_DECOR = "home-decor"
    ELECTRONICS = "electronics"
    CLOTHING_ACCESSORIES = "clothing-accessories"
    STATIONERY_CRAFT = "stationery-craft"
    SPORTS_OUTDOORS = "sports-outdoors"
    COLLECTIBLES = "collectibles"
    WELLNESS_BEAUTY = "wellness-beauty"
    OTHER = "other"

    ORDERED = (
        TOYS,
        GAMES_PUZZLES,
        BOOKS,
        KITCHEN,
        HOME_DECOR,
        ELECTRONICS,
        CLOTHING_ACCESSORIES,
        STATIONERY_CRAFT,
        SPORTS_OUTDOORS,
        COLLECTIBLES,
        WELLNESS_BEAUTY,
    )
    ALL = ORDERED + (OTHER,)


class AgeRange:
    """Age range labels. ANY_AGE is only ever used as the fallback."""
    BABY = "baby"
    YOUNG_CHILD = "young-child"
    OLDER_CHILD = "older-child"
    TEEN = "teen"
    ADULT = "adult"
    ANY_AGE = "any-age"

    ORDERED = (BABY, YOUNG_CHILD, OLDER_CHILD, TEEN, ADULT)
    ALL = ORDERED + (ANY_AGE,)


class Theme:
    """Theme vocabulary, in declaration order."""
    EDUCATIONAL = "educational"
    CREATIVE = "creative"
    OUTDOOR = "outdoor"
    INDOOR = "indoor"
    TECH = "tech"
    COOKING = "cooking"
    READING = "reading"
    ANIMALS = "animals"
    VEHICLES = "vehicles"

    ORDERED = (
        EDUCATIONAL,
        CREATIVE,
        OUTDOOR,
        INDOOR,
        TECH,
        COOKING,
        READING,
        ANIMALS,
        VEHICLES,
    )


class Availability:
    """Item availability states"""
    AVAILABLE = "available"
    RESERVED = "reserved"
    GIFTED = "gifted"

    ALL = (AVAILABLE, RESERVED, GIFTED)


class Condition:
    """Physical condition of an item"""
    NEW = "new"
    LIKE_NEW = "like-new"
    GENTLY_USED = "gently-used"
    VINTAGE = "vintage"

    ALL = (NEW, LIKE_NEW, GENTLY_USED, VINTAGE)
