from rest_framework import serializers

from Creator_REST_API.Users.serializers import UserSummarySerializer
from Teams.models import Brand

from .models import Action, ActionType, TemporaryContent
from .payloads import GenerationDetails, parse_result


class BrandSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = Brand
        fields = ['id', 'name']
        read_only_fields = fields


class ActionSerializer(serializers.ModelSerializer):
    """Full Action representation returned by the lifecycle endpoints."""
    teamId = serializers.UUIDField(source='team_id', read_only=True)
    userId = serializers.IntegerField(source='user_id', read_only=True)
    brandId = serializers.UUIDField(source='brand_id', read_only=True)
    typeDisplay = serializers.CharField(source='get_type_display', read_only=True)
    brand = BrandSummarySerializer(read_only=True)
    user = UserSummarySerializer(read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Action
        fields = [
            'id', 'type', 'typeDisplay', 'status', 'approved', 'revisions',
            'result', 'details', 'teamId', 'userId', 'brandId', 'brand', 'user',
            'createdAt', 'updatedAt'
        ]
        read_only_fields = fields


class ActionSummarySerializer(serializers.ModelSerializer):
    """Essential fields only, for dashboard summaries."""
    brand = BrandSummarySerializer(read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Action
        fields = ['id', 'type', 'createdAt', 'brand']
        read_only_fields = fields


class ActionCreateSerializer(serializers.Serializer):
    """Serializer for creating actions."""
    teamId = serializers.UUIDField()
    brandId = serializers.UUIDField()
    userId = serializers.IntegerField(required=False)
    type = serializers.ChoiceField(choices=ActionType.choices)
    details = serializers.JSONField(required=False, allow_null=True)
    result = serializers.JSONField(required=False, allow_null=True)

    def validate(self, data):
        try:
            result = parse_result(data['type'], data.get('result'))
            details = GenerationDetails.from_dict(data.get('details'))
        except ValueError as e:
            raise serializers.ValidationError(str(e))

        data['result'] = result.to_dict() if result is not None else None
        data['details'] = details.to_dict() if details is not None else None
        return data


class ActionUpdateSerializer(serializers.Serializer):
    """Partial update of an Action; the type itself is immutable."""
    result = serializers.JSONField(required=False, allow_null=True)
    status = serializers.CharField(required=False, max_length=50)
    approved = serializers.BooleanField(required=False)
    revisions = serializers.IntegerField(required=False, min_value=0)

    def validate_result(self, value):
        if value is None:
            return value
        try:
            return parse_result(self.instance.type, value).to_dict()
        except ValueError as e:
            raise serializers.ValidationError(str(e))


class ApproveRequestSerializer(serializers.Serializer):
    requesterUserId = serializers.IntegerField(required=False, allow_null=True)
    temporaryContentId = serializers.CharField(required=False, allow_null=True, allow_blank=True)


class ReviewRequestSerializer(serializers.Serializer):
    requesterUserId = serializers.IntegerField(required=False, allow_null=True)
    newImageUrl = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    newTitle = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    newBody = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    newHashtags = serializers.ListField(
        child=serializers.CharField(allow_blank=True), required=False, allow_null=True)


class TemporaryContentSerializer(serializers.ModelSerializer):
    actionId = serializers.UUIDField(source='action_id', read_only=True, allow_null=True)
    userId = serializers.IntegerField(source='user_id', read_only=True)
    teamId = serializers.UUIDField(source='team_id', read_only=True)
    imageUrl = serializers.CharField(source='image_url', read_only=True)
    originalId = serializers.CharField(source='original_id', read_only=True, allow_null=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)
    expiresAt = serializers.DateTimeField(source='expires_at', read_only=True)

    class Meta:
        model = TemporaryContent
        fields = [
            'id', 'actionId', 'userId', 'teamId', 'imageUrl', 'title', 'body',
            'hashtags', 'revisions', 'brand', 'theme', 'originalId',
            'createdAt', 'updatedAt', 'expiresAt'
        ]
        read_only_fields = fields


class TemporaryContentCreateSerializer(serializers.Serializer):
    userId = serializers.IntegerField(required=False)
    teamId = serializers.UUIDField()
    actionId = serializers.UUIDField(required=False, allow_null=True)
    imageUrl = serializers.CharField()
    title = serializers.CharField()
    body = serializers.CharField()
    hashtags = serializers.ListField(
        child=serializers.CharField(allow_blank=True), required=False, default=list)
    brand = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    theme = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    originalId = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    revisions = serializers.IntegerField(required=False, default=0, min_value=0)

    def to_service_data(self):
        data = self.validated_data
        return {
            'action_id': data.get('actionId'),
            'image_url': data['imageUrl'],
            'title': data['title'],
            'body': data['body'],
            'hashtags': data.get('hashtags', []),
            'brand': data.get('brand'),
            'theme': data.get('theme'),
            'original_id': data.get('originalId'),
            'revisions': data.get('revisions', 0),
        }


class TemporaryContentUpdateSerializer(serializers.Serializer):
    id = serializers.CharField()
    userId = serializers.IntegerField(required=False)
    teamId = serializers.UUIDField()
    imageUrl = serializers.CharField(required=False, allow_blank=True)
    title = serializers.CharField(required=False, allow_blank=True)
    body = serializers.CharField(required=False, allow_blank=True)
    hashtags = serializers.ListField(
        child=serializers.CharField(allow_blank=True), required=False)
    revisions = serializers.IntegerField(required=False, min_value=0)

    def to_service_data(self):
        data = self.validated_data
        return {
            'image_url': data.get('imageUrl'),
            'title': data.get('title'),
            'body': data.get('body'),
            'hashtags': data.get('hashtags'),
            'revisions': data.get('revisions'),
        }
