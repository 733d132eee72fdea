from rest_framework import serializers

from taxonomy.models import Taxonomy, Term
from taxonomy.services import Mode


class TaxonomySerializer(serializers.ModelSerializer):
    terms_count = serializers.IntegerField(read_only=True)

    class Meta:
        model = Taxonomy
        fields = ("id", "name", "label", "hierarchical", "terms_count")


class TermSerializer(serializers.ModelSerializer):
    taxonomy = serializers.SlugRelatedField(read_only=True, slug_field="name")
    parent_slug = serializers.SlugRelatedField(
        read_only=True, source="parent", slug_field="slug"
    )
    level = serializers.IntegerField(read_only=True)

    class Meta:
        model = Term
        fields = ("id", "taxonomy", "name", "slug", "parent", "parent_slug", "level", "count")


class ChangeRecordSerializer(serializers.Serializer):
    taxonomy = serializers.CharField()
    term_id = serializers.IntegerField()
    name = serializers.CharField()
    old_slug = serializers.CharField()
    new_slug = serializers.CharField()


class ReconcileFailureSerializer(serializers.Serializer):
    taxonomy = serializers.CharField()
    term_id = serializers.IntegerField(allow_null=True)
    message = serializers.CharField()


class ReconcileResultSerializer(serializers.Serializer):
    mode = serializers.ChoiceField(choices=[m.value for m in Mode])
    updated = serializers.IntegerField()
    scanned = serializers.IntegerField()
    changes = ChangeRecordSerializer(many=True)
    failures = ReconcileFailureSerializer(many=True)

    def to_representation(self, instance):
        data = super().to_representation(instance)
        # Mode - str-enum, отдаём голое значение
        data["mode"] = Mode(instance.mode).value
        return data
