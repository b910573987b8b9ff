"""Constants for Employee model field names"""


class EmployeeFields:
    """Field name constants for Employee documents"""
    NAME = "name"
    SALARY = "salary"
    AGE = "age"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
