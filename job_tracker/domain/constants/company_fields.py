"""Constants for Company document field names"""


class CompanyFields:
    """Field name constants for Company documents (camelCase, as stored and served)"""
    COMPANY_NAME = "companyName"
    COUNTRY = "country"
    COMPANY_WEBSITE = "companyWebsite"
    AVAILABLE_POSITIONS = "availablePositions"
    DATE_ADDED = "dateAdded"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
