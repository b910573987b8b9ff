"""
MongoEmployeeRepository Tests
=============================

Document mapping and error wrapping against an in-memory collection.
"""
import pytest
from unittest.mock import patch

from bson import ObjectId
from bson.errors import InvalidDocument
from pymongo.errors import PyMongoError

from hrms.domain.exceptions import InvalidEmployeeIdError, EmployeeNotFoundError, StoreError
from hrms.domain.models.employee import Employee


class TestInsertAndFind:

    def test_insert_stores_plain_document(self, repository, employees_collection):
        employee_id = repository.insert(Employee(name="Ana", salary=5000.0, age=30))

        doc = employees_collection.find_one({"_id": ObjectId(employee_id)})
        assert doc == {"_id": ObjectId(employee_id), "name": "Ana", "salary": 5000.0, "age": 30}

    def test_insert_never_writes_entity_id(self, repository, employees_collection):
        """The store assigns _id; an id on the entity is not persisted."""
        employee_id = repository.insert(Employee(name="Ana", id="client-id"))

        assert employee_id != "client-id"
        assert employees_collection.count_documents({"id": {"$exists": True}}) == 0

    def test_find_by_id_round_trips(self, repository):
        employee_id = repository.insert(Employee(name="Ana", salary=5000.0, age=30))

        found = repository.find_by_id(employee_id)

        assert found == Employee(id=employee_id, name="Ana", salary=5000.0, age=30)

    def test_find_by_id_unknown_returns_none(self, repository):
        assert repository.find_by_id(str(ObjectId())) is None

    def test_find_all_empty(self, repository):
        assert repository.find_all() == []

    def test_find_all_tolerates_sparse_documents(self, repository, employees_collection):
        """Documents written by other clients may lack fields."""
        oid = employees_collection.insert_one({"name": "Legacy"}).inserted_id

        assert repository.find_all() == [Employee(id=str(oid), name="Legacy", salary=0.0, age=0)]


class TestMalformedIds:

    @pytest.mark.parametrize("bad_id", ["", "123", "not-an-object-id", "g" * 24])
    def test_find_by_id_rejects(self, repository, bad_id):
        with pytest.raises(InvalidEmployeeIdError):
            repository.find_by_id(bad_id)

    def test_update_rejects(self, repository):
        with pytest.raises(InvalidEmployeeIdError):
            repository.update("123", Employee(name="Ana"))

    def test_delete_rejects(self, repository):
        with pytest.raises(InvalidEmployeeIdError):
            repository.delete("123")

    def test_invalid_id_is_a_not_found(self, repository):
        """Malformed ids are handled by not-found handlers."""
        with pytest.raises(EmployeeNotFoundError):
            repository.delete("123")


class TestUpdateAndDelete:

    def test_update_sets_only_mutable_fields(self, repository, employees_collection):
        employee_id = repository.insert(Employee(name="Ana", salary=5000.0, age=30))

        matched = repository.update(employee_id, Employee(name="Ana", salary=5500.0, age=31, id="ignored"))

        assert matched is True
        doc = employees_collection.find_one({"_id": ObjectId(employee_id)})
        assert doc == {"_id": ObjectId(employee_id), "name": "Ana", "salary": 5500.0, "age": 31}

    def test_update_unknown_returns_false(self, repository):
        assert repository.update(str(ObjectId()), Employee(name="Ana")) is False

    def test_delete_existing(self, repository):
        employee_id = repository.insert(Employee(name="Ana"))

        assert repository.delete(employee_id) is True
        assert repository.find_by_id(employee_id) is None

    def test_delete_unknown_returns_false(self, repository):
        assert repository.delete(str(ObjectId())) is False


class TestStoreErrors:

    @pytest.mark.parametrize("method, call", [
        ("find", lambda repo: repo.find_all()),
        ("insert_one", lambda repo: repo.insert(Employee(name="Ana"))),
        ("find_one", lambda repo: repo.find_by_id(str(ObjectId()))),
        ("find_one_and_update", lambda repo: repo.update(str(ObjectId()), Employee())),
        ("delete_one", lambda repo: repo.delete(str(ObjectId()))),
    ])
    def test_driver_errors_become_store_errors(self, repository, method, call):
        with patch.object(repository._collection, method, side_effect=PyMongoError("connection reset")):
            with pytest.raises(StoreError, match="connection reset"):
                call(repository)

    def test_bson_encoding_errors_become_store_errors(self, repository):
        """Values BSON cannot encode surface as store errors, not bare exceptions."""
        with patch.object(
            repository._collection, "insert_one", side_effect=OverflowError("MongoDB can only handle up to 8-byte ints")
        ):
            with pytest.raises(StoreError, match="8-byte ints"):
                repository.insert(Employee(name="Ana", age=2 ** 70))

    def test_invalid_document_errors_become_store_errors(self, repository):
        with patch.object(repository._collection, "find_one_and_update", side_effect=InvalidDocument("bad key")):
            with pytest.raises(StoreError, match="bad key"):
                repository.update(str(ObjectId()), Employee())


class TestDecoding:

    def test_wrong_field_types_raise_store_error(self, repository, employees_collection):
        oid = employees_collection.insert_one({"name": 5, "age": "old", "salary": "lots"}).inserted_id

        with pytest.raises(StoreError, match=str(oid)):
            repository.find_all()

    def test_find_by_id_wrong_field_types_raise_store_error(self, repository, employees_collection):
        oid = employees_collection.insert_one({"name": "Ana", "salary": "lots"}).inserted_id

        with pytest.raises(StoreError):
            repository.find_by_id(str(oid))

    def test_numeric_fields_are_normalised(self, repository, employees_collection):
        """Integer salaries written by other clients read back as floats."""
        oid = employees_collection.insert_one({"name": "Ana", "salary": 5000, "age": 30}).inserted_id

        employee = repository.find_by_id(str(oid))

        assert isinstance(employee.salary, float)
        assert employee == Employee(id=str(oid), name="Ana", salary=5000.0, age=30)
