"""Registration of the built-in discriminator vocabulary."""

from __future__ import annotations

from metadata_exchange.registry import DiscriminatorRegistry

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
from .governance import (
    GovernanceClassificationBase,
    GovernanceClassificationProperties,
    RetentionClassificationProperties,
)
from .referenceable import (
    ExternalReferenceProperties,
    ReferenceableProperties,
    RelatedMediaProperties,
)

# family -> variants registered directly beneath it, tagged by class name
BUILTIN_VARIANTS: dict[type, tuple[type, ...]] = {
    ClassificationProperties: (
        ClassificationProperties,
        ActivityDescriptionProperties,
        AssetOriginProperties,
        CanonicalVocabularyProperties,
        DataFieldValuesProperties,
        EditingGlossaryProperties,
        GlossaryTermContextDefinition,
        GovernanceClassificationBase,
        OwnerProperties,
        SecurityTagsProperties,
        StagingGlossaryProperties,
        SubjectAreaMemberProperties,
        TaxonomyProperties,
    ),
    GovernanceClassificationBase: (
        GovernanceClassificationProperties,
        RetentionClassificationProperties,
    ),
    ReferenceableProperties: (
        ReferenceableProperties,
        ExternalReferenceProperties,
    ),
    ExternalReferenceProperties: (RelatedMediaProperties,),
}


def register_builtin_variants(target: DiscriminatorRegistry) -> None:
    for family, variants in BUILTIN_VARIANTS.items():
        for variant in variants:
            target.register(family, variant, variant.__name__)


__all__ = ["BUILTIN_VARIANTS", "register_builtin_variants"]
