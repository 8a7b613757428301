"""Tests for the pydantic Size transfer object."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from image_sizes.application import SizeDTO
from image_sizes.domain import MAX_DIMENSION, Orientation, Scale, Size


class TestSizeDTOValidation:
    """Test payload validation."""

    def test_valid_payload(self):
        """Test a canonical payload."""
        dto = SizeDTO.model_validate(
            {"orientation": "landscape", "scale": "lg", "width": 1920, "height": 1080}
        )

        assert dto.orientation == "landscape"
        assert dto.scale == "lg"
        assert (dto.width, dto.height) == (1920, 1080)

    def test_tokens_are_normalized(self):
        """Test tokens are coerced to canonical form."""
        dto = SizeDTO.model_validate(
            {"orientation": "PORTRAIT", "scale": "Xxlg", "width": 1, "height": 2}
        )

        assert dto.orientation == "portrait"
        assert dto.scale == "xxlg"

    def test_unknown_tokens_become_empty(self):
        """Test unrecognized tokens are accepted as UNKNOWN."""
        dto = SizeDTO.model_validate(
            {"orientation": "square", "scale": "jumbo", "width": 1, "height": 2}
        )

        assert dto.orientation == ""
        assert dto.scale == ""

    def test_missing_tokens_default_to_empty(self):
        """Test absent tokens default to UNKNOWN."""
        dto = SizeDTO.model_validate({"width": 0, "height": 0})

        assert dto.to_domain().is_empty()

    def test_extra_keys_are_ignored(self):
        """Test forward-compatible payloads."""
        dto = SizeDTO.model_validate(
            {"orientation": "thumbnail", "scale": "sm", "width": 8, "height": 8, "dpi": 72}
        )

        assert not hasattr(dto, "dpi")

    def test_missing_width_is_rejected(self):
        """Test width is required."""
        with pytest.raises(PydanticValidationError):
            SizeDTO.model_validate({"orientation": "thumbnail", "scale": "sm", "height": 8})

    @pytest.mark.parametrize("width", [-1, MAX_DIMENSION + 1, "8", 8.5, True, None])
    def test_invalid_width_is_rejected(self, width):
        """Test width must be a strict integer within the dimension bound."""
        with pytest.raises(PydanticValidationError):
            SizeDTO.model_validate({"width": width, "height": 8})

    def test_dto_is_frozen(self):
        """Test the DTO cannot be mutated."""
        dto = SizeDTO(width=1, height=1)

        with pytest.raises(PydanticValidationError):
            dto.width = 2


class TestSizeDTOConversion:
    """Test conversion to and from the domain type."""

    def test_round_trip(self, sample_sizes):
        """Test from_domain(s).to_domain() == s."""
        for size in sample_sizes:
            assert SizeDTO.from_domain(size).to_domain() == size

    def test_json_matches_codec_record(self, landscape_size):
        """Test the DTO dumps the same record as Size.to_dict()."""
        assert SizeDTO.from_domain(landscape_size).model_dump() == landscape_size.to_dict()

    def test_to_domain(self):
        """Test building a Size from a validated payload."""
        dto = SizeDTO.model_validate_json(
            '{"orientation":"thumbnail","scale":"md","width":32,"height":32}'
        )

        assert dto.to_domain() == Size(Orientation.THUMBNAIL, Scale.MD, 32, 32)
