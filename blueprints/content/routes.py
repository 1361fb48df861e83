"""
Content Routes - Uniform CRUD endpoints for portfolio content
Handles: Every list-style entity through one route factory
"""

from flask import request, jsonify, current_app
from utils import repository
from utils.decorators import login_required
from utils.schemas import (
    validate_payload,
    ArticleSchema, ArticleUpdateSchema,
    SkillSchema, SkillUpdateSchema,
    ExperienceSchema, ExperienceUpdateSchema,
    EducationSchema, EducationUpdateSchema,
    ActivitySchema, ActivityUpdateSchema,
    ValueSchema, ValueUpdateSchema,
    SocialLinkSchema, SocialLinkUpdateSchema
)
from . import content_bp


def register_crud(bp, path, repo, create_schema, update_schema, label):
    """
    Register list/get/create/update/delete routes for one entity

    Args:
        bp (Blueprint): Blueprint to attach the routes to
        path (str): URL segment, e.g. ``social-links``
        repo (Repository): Storage for the entity
        create_schema: Schema a POST body must satisfy
        update_schema: Partial schema for PUT bodies
        label (str): Name used in error messages, e.g. ``article``
    """
    name = path.replace('-', '_')

    def list_items():
        return jsonify([item.to_dict() for item in repo.list()])

    def get_item(item_id):
        return jsonify(repo.get(item_id).to_dict())

    @login_required
    def create_item():
        fields = validate_payload(create_schema, request.get_json(silent=True), label)
        item = repo.create(fields)
        current_app.logger.info(f"Created {label} {item.id}")
        return jsonify(item.to_dict()), 201

    @login_required
    def update_item(item_id):
        fields = validate_payload(update_schema, request.get_json(silent=True), label)
        item = repo.update(item_id, fields)
        return jsonify(item.to_dict())

    @login_required
    def delete_item(item_id):
        repo.delete(item_id)
        current_app.logger.info(f"Deleted {label} {item_id}")
        return jsonify({'message': f"{repo.label} deleted successfully"})

    bp.add_url_rule(f'/{path}', f'list_{name}', list_items, methods=['GET'])
    bp.add_url_rule(f'/{path}', f'create_{name}', create_item, methods=['POST'])
    bp.add_url_rule(f'/{path}/<int:item_id>', f'get_{name}', get_item, methods=['GET'])
    bp.add_url_rule(f'/{path}/<int:item_id>', f'update_{name}', update_item, methods=['PUT'])
    bp.add_url_rule(f'/{path}/<int:item_id>', f'delete_{name}', delete_item, methods=['DELETE'])


# (url segment, repository, create schema, update schema, label)
RESOURCES = [
    ('articles', repository.articles, ArticleSchema, ArticleUpdateSchema, 'article'),
    ('skills', repository.skills, SkillSchema, SkillUpdateSchema, 'skill'),
    ('experiences', repository.experiences, ExperienceSchema, ExperienceUpdateSchema, 'experience'),
    ('education', repository.education, EducationSchema, EducationUpdateSchema, 'education'),
    ('activities', repository.activities, ActivitySchema, ActivityUpdateSchema, 'activity'),
    ('values', repository.values, ValueSchema, ValueUpdateSchema, 'value'),
    ('social-links', repository.social_links, SocialLinkSchema, SocialLinkUpdateSchema, 'social link'),
]

for resource in RESOURCES:
    register_crud(content_bp, *resource)
