"""Tests for the typed Action payloads."""

import pytest

from ContentActions.models import ActionType
from ContentActions.payloads import (
    CreateContentResult,
    GenerationDetails,
    PlanContentResult,
    ReviewContentResult,
    parse_result,
)


def test_parse_result_picks_shape_by_action_type():
    result = parse_result(ActionType.CREATE_CONTENT, {
        'imageUrl': 'img.png',
        'title': 'Título',
        'body': 'Corpo',
        'hashtags': ['#a', '#b'],
    })

    assert isinstance(result, CreateContentResult)
    assert result.image_url == 'img.png'
    assert result.hashtags == ['#a', '#b']

    assert isinstance(parse_result('REVIEW_CONTENT', {'feedback': 'ok'}), ReviewContentResult)
    assert isinstance(parse_result('PLAN_CONTENT', {'plan': 'semana 1'}), PlanContentResult)


def test_parse_result_keeps_none():
    assert parse_result(ActionType.PLAN_CONTENT, None) is None


def test_parse_result_rejects_keys_of_other_shapes():
    with pytest.raises(ValueError, match='feedback'):
        parse_result(ActionType.CREATE_CONTENT, {'feedback': 'não pertence'})


def test_parse_result_rejects_unknown_type():
    with pytest.raises(ValueError, match='desconhecido'):
        parse_result('PUBLISH_CONTENT', {})


def test_parse_result_rejects_non_object():
    with pytest.raises(ValueError):
        parse_result(ActionType.CREATE_CONTENT, ['lista'])


def test_parse_result_validates_field_types():
    with pytest.raises(ValueError, match='hashtags'):
        parse_result(ActionType.CREATE_CONTENT, {'hashtags': 'nao-lista'})
    with pytest.raises(ValueError, match='title'):
        parse_result(ActionType.CREATE_CONTENT, {'title': 10})


def test_to_dict_uses_camel_case_and_drops_missing_fields():
    result = CreateContentResult(image_url='img', title='t', body='b', hashtags=['#a'])

    assert result.to_dict() == {
        'imageUrl': 'img',
        'title': 't',
        'body': 'b',
        'hashtags': ['#a'],
    }
    assert ReviewContentResult(feedback='ok').to_dict() == {'feedback': 'ok'}


def test_generation_details_keeps_extra_keys():
    details = GenerationDetails.from_dict({
        'prompt': 'Post de Natal',
        'platform': 'instagram',
        'tone': 'leve',
    })

    assert details.prompt == 'Post de Natal'
    assert details.extra == {'tone': 'leve'}
    assert details.to_dict() == {
        'prompt': 'Post de Natal',
        'platform': 'instagram',
        'tone': 'leve',
    }


def test_generation_details_none_and_invalid():
    assert GenerationDetails.from_dict(None) is None
    with pytest.raises(ValueError):
        GenerationDetails.from_dict('texto')
