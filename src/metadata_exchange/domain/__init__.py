"""Public exports for the property model."""

from metadata_exchange.registry import registry

from .base import PolymorphicProperties, PropertiesModel, freeze
from .classification import (
    ActivityDescriptionProperties,
    AssetOriginProperties,
    CanonicalVocabularyProperties,
    ClassificationProperties,
    DataFieldValuesProperties,
    EditingGlossaryProperties,
    GlossaryTermContextDefinition,
    OwnerProperties,
    SecurityTagsProperties,
    StagingGlossaryProperties,
    SubjectAreaMemberProperties,
    TaxonomyProperties,
)
from .correlation import (
    ExternalReferenceRequestBody,
    MetadataCorrelationProperties,
    UpdateRequestBody,
)
from .effective import EffectiveDatedProperties
from .enums import (
    ActivityType,
    GovernanceClassificationStatus,
    KeyPattern,
    MediaType,
    MediaUsage,
    SynchronizationDirection,
)
from .governance import (
    GovernanceClassificationBase,
    GovernanceClassificationProperties,
    RetentionClassificationProperties,
)
from .query import QueryTargetProperties, duplicate_query_ids, execution_order
from .referenceable import (
    ExternalReferenceProperties,
    ReferenceableProperties,
    RelatedMediaProperties,
)
from .types import Guid, PrimitiveInt, PropertyBag, StringMap, Timestamp
from .variants import BUILTIN_VARIANTS, register_builtin_variants

if not registry.is_frozen:
    register_builtin_variants(registry)
    registry.freeze()

__all__ = [
    "BUILTIN_VARIANTS",
    "ActivityDescriptionProperties",
    "ActivityType",
    "AssetOriginProperties",
    "CanonicalVocabularyProperties",
    "ClassificationProperties",
    "DataFieldValuesProperties",
    "EditingGlossaryProperties",
    "EffectiveDatedProperties",
    "ExternalReferenceProperties",
    "ExternalReferenceRequestBody",
    "GlossaryTermContextDefinition",
    "GovernanceClassificationBase",
    "GovernanceClassificationProperties",
    "GovernanceClassificationStatus",
    "Guid",
    "KeyPattern",
    "MediaType",
    "MediaUsage",
    "MetadataCorrelationProperties",
    "OwnerProperties",
    "PolymorphicProperties",
    "PrimitiveInt",
    "PropertiesModel",
    "PropertyBag",
    "QueryTargetProperties",
    "ReferenceableProperties",
    "RelatedMediaProperties",
    "RetentionClassificationProperties",
    "SecurityTagsProperties",
    "StagingGlossaryProperties",
    "StringMap",
    "SubjectAreaMemberProperties",
    "SynchronizationDirection",
    "TaxonomyProperties",
    "Timestamp",
    "UpdateRequestBody",
    "duplicate_query_ids",
    "execution_order",
    "freeze",
    "register_builtin_variants",
]
