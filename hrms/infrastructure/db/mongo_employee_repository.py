"""
MongoDB Employee Repository
===========================

Concrete implementation of EmployeeRepository using MongoDB.
"""
import logging
from typing import List, Optional

from bson import ObjectId
from bson.errors import BSONError, InvalidId
from pydantic import BaseModel, ValidationError
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from hrms.domain.constants.employee_fields import EmployeeFields
from hrms.domain.exceptions import InvalidEmployeeIdError, StoreError
from hrms.domain.models.employee import Employee
from hrms.domain.repositories.employee_repository import EmployeeRepository
from hrms.infrastructure.db.mongo_connection import MongoConnectionManager

logger = logging.getLogger(__name__)

# Driver failures plus BSON encoding errors (e.g. ints beyond int64)
STORE_ERRORS = (PyMongoError, BSONError, OverflowError)


class EmployeeDocument(BaseModel):
    """Shape check for documents read back from the collection."""
    name: str = ""
    salary: float = 0.0
    age: int = 0


class MongoEmployeeRepository(EmployeeRepository):
    """
    MongoDB implementation of EmployeeRepository.

    Every public method performs a single collection call. Driver and BSON errors
    are wrapped in StoreError with the driver's message preserved.
    """

    COLLECTION_NAME = "employees"

    def __init__(self, connection: MongoConnectionManager, collection_name: Optional[str] = None):
        """Initialize repository with the shared MongoDB connection."""
        self._collection: Collection = connection.get_collection(
            collection_name or self.COLLECTION_NAME
        )

    @staticmethod
    def _to_object_id(employee_id: str) -> ObjectId:
        """Parse a hex id string into an ObjectId."""
        try:
            return ObjectId(employee_id)
        except (InvalidId, TypeError) as e:
            raise InvalidEmployeeIdError(employee_id) from e

    def _to_entity(self, doc: dict) -> Employee:
        """
        Convert MongoDB document to Employee entity.

        Raises:
            StoreError: If the document does not decode into the Employee shape
        """
        employee_id = str(doc[EmployeeFields.MONGO_ID])
        try:
            fields = EmployeeDocument.model_validate(doc)
        except ValidationError as e:
            logger.error(f"Employee document {employee_id} failed to decode: {e}")
            raise StoreError(f"Could not decode employee {employee_id}: {e}") from e

        return Employee(
            id=employee_id,
            name=fields.name,
            salary=fields.salary,
            age=fields.age,
        )

    def _to_document(self, employee: Employee) -> dict:
        """Convert Employee entity to MongoDB document (without _id)."""
        return {
            EmployeeFields.NAME: employee.name,
            EmployeeFields.SALARY: employee.salary,
            EmployeeFields.AGE: employee.age,
        }

    def find_all(self) -> List[Employee]:
        """Return every employee in natural order."""
        try:
            docs = self._collection.find({})
            return [self._to_entity(doc) for doc in docs]
        except STORE_ERRORS as e:
            logger.error(f"Failed to list employees: {e}")
            raise StoreError(str(e)) from e

    def insert(self, employee: Employee) -> str:
        """Insert a new employee and return its generated id."""
        try:
            result = self._collection.insert_one(self._to_document(employee))
        except STORE_ERRORS as e:
            logger.error(f"Failed to insert employee: {e}")
            raise StoreError(str(e)) from e
        return str(result.inserted_id)

    def find_by_id(self, employee_id: str) -> Optional[Employee]:
        """Find an employee by its id."""
        object_id = self._to_object_id(employee_id)
        try:
            doc = self._collection.find_one({EmployeeFields.MONGO_ID: object_id})
        except STORE_ERRORS as e:
            logger.error(f"Failed to fetch employee {employee_id}: {e}")
            raise StoreError(str(e)) from e
        if not doc:
            return None
        return self._to_entity(doc)

    def update(self, employee_id: str, employee: Employee) -> bool:
        """Set name, age and salary on the matching document."""
        object_id = self._to_object_id(employee_id)
        try:
            result = self._collection.find_one_and_update(
                {EmployeeFields.MONGO_ID: object_id},
                {
                    "$set": {
                        EmployeeFields.NAME: employee.name,
                        EmployeeFields.AGE: employee.age,
                        EmployeeFields.SALARY: employee.salary,
                    }
                },
            )
        except STORE_ERRORS as e:
            logger.error(f"Failed to update employee {employee_id}: {e}")
            raise StoreError(str(e)) from e
        return result is not None

    def delete(self, employee_id: str) -> bool:
        """Delete the employee with the given id."""
        object_id = self._to_object_id(employee_id)
        try:
            result = self._collection.delete_one({EmployeeFields.MONGO_ID: object_id})
        except STORE_ERRORS as e:
            logger.error(f"Failed to delete employee {employee_id}: {e}")
            raise StoreError(str(e)) from e
        return result.deleted_count > 0
