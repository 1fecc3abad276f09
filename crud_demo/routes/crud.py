# crud_demo/routes/crud.py
import logging
from flask import Blueprint, jsonify
from ..errors import Failure, error_response, read_body

logger = logging.getLogger(__name__)


def crud_blueprint(name, repo, schema, validate, label, before_create=None):
    """
    Blueprint with list/get/create/update/delete over one repository.

    `label` names the entity in not-found messages ("Course not found").
    `before_create(entity)` may fill server-assigned fields on a new record;
    update copies body fields only, so those fields are never overwritten.
    """
    bp = Blueprint(name, __name__)
    model = repo.model

    def not_found(entity_id):
        logger.warning("%s %s not found", label, entity_id)
        return error_response(Failure.not_found(f"{label} not found"))

    @bp.get("")
    def list_all():
        return jsonify(schema.dump(repo.find_all(), many=True))

    @bp.get("/<int(signed=True):entity_id>")
    def get_one(entity_id):
        entity = repo.find_by_id(entity_id)
        if entity is None:
            return not_found(entity_id)
        return jsonify(schema.dump(entity))

    @bp.post("")
    def create():
        data, failure = read_body(schema, validate)
        if failure:
            return error_response(failure)
        entity = model(**data)
        if before_create:
            before_create(entity)
        repo.save(entity)
        logger.info("Created %s %s", label, entity.id)
        return jsonify(schema.dump(entity)), 201

    @bp.put("/<int(signed=True):entity_id>")
    def update(entity_id):
        data, failure = read_body(schema, validate)
        if failure:
            return error_response(failure)
        entity = repo.find_by_id(entity_id)
        if entity is None:
            return not_found(entity_id)
        for k, v in data.items():
            setattr(entity, k, v)
        repo.save(entity)
        return jsonify(schema.dump(entity))

    @bp.delete("/<int(signed=True):entity_id>")
    def delete(entity_id):
        if not repo.exists_by_id(entity_id):
            return not_found(entity_id)
        repo.delete_by_id(entity_id)
        logger.info("Deleted %s %s", label, entity_id)
        return "", 204

    return bp
