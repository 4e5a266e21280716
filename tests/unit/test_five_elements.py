#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""五行分析单元测试"""

import pytest

from core.analyzers.wuxing_balance_analyzer import WuxingBalanceAnalyzer
from core.calculators.bazi_core.element_relations import (
    get_draining_elements,
    get_element_relation,
    get_supporting_elements,
)
from core.data.constants import FIVE_ELEMENTS


def _counts(wood=0, fire=0, earth=0, metal=0, water=0):
    return {'木': wood, '火': fire, '土': earth, '金': metal, '水': water}


class TestElementRelations:
    @pytest.mark.parametrize("target,expected", [
        ('木', 'same'),
        ('火', 'me_producing'),
        ('土', 'me_controlling'),
        ('水', 'producing_me'),
        ('金', 'controlling_me'),
    ])
    def test_relations_of_wood(self, target, expected):
        assert get_element_relation('木', target) == expected

    def test_invalid_element(self):
        with pytest.raises(ValueError):
            get_element_relation('木', '风')

    @pytest.mark.parametrize("element", FIVE_ELEMENTS)
    def test_support_and_drain_partition(self, element):
        """生扶 2 个、泄耗 3 个，互不重叠且覆盖五行"""
        support = get_supporting_elements(element)
        drain = get_draining_elements(element)
        assert len(support) == 2 and len(drain) == 3
        assert set(support).isdisjoint(drain)
        assert set(support) | set(drain) == set(FIVE_ELEMENTS)


class TestCountElements:
    def test_count(self):
        counts = WuxingBalanceAnalyzer.count_elements(['甲', '丙', '戊', '庚'], ['子', '寅', '午', '申'])
        assert counts == _counts(wood=2, fire=2, earth=1, metal=2, water=1)
        assert sum(counts.values()) == 8

    def test_missing_and_strongest(self):
        counts = WuxingBalanceAnalyzer.count_elements(['甲', '甲', '乙', '乙'], ['寅', '卯', '寅', '子'])
        assert counts['木'] == 7
        assert WuxingBalanceAnalyzer.get_missing_elements(counts) == ['火', '土', '金']
        assert WuxingBalanceAnalyzer.get_strongest_elements(counts) == ['木']

    def test_strongest_ties(self):
        counts = WuxingBalanceAnalyzer.count_elements(['甲', '丙', '戊', '庚'], ['子', '寅', '午', '申'])
        assert WuxingBalanceAnalyzer.get_strongest_elements(counts) == ['木', '火', '金']

    def test_strongest_all_zero(self):
        """五行全为 0 时五行并列最多"""
        assert WuxingBalanceAnalyzer.get_strongest_elements(_counts()) == list(FIVE_ELEMENTS)

    def test_missing_partition(self):
        """缺失五行与出现五行构成五行全集"""
        counts = WuxingBalanceAnalyzer.count_elements(['壬', '癸', '庚', '辛'], ['子', '亥', '申', '酉'])
        missing = WuxingBalanceAnalyzer.get_missing_elements(counts)
        present = [e for e in FIVE_ELEMENTS if counts[e] > 0]
        assert set(missing).isdisjoint(present)
        assert set(missing) | set(present) == set(FIVE_ELEMENTS)

    def test_unknown_symbols_ignored(self):
        counts = WuxingBalanceAnalyzer.count_elements(['甲', 'X'], ['子', ''])
        assert sum(counts.values()) == 2

    @pytest.mark.parametrize("count,label", [(0, '缺'), (1, '弱'), (2, '平'), (3, '旺'), (4, '极旺'), (6, '极旺')])
    def test_strength_label(self, count, label):
        assert WuxingBalanceAnalyzer.get_element_strength_label(count) == label


class TestDayMasterStrength:
    @pytest.mark.parametrize("counts,label,is_strong", [
        (_counts(wood=4, water=2, fire=1, earth=1), '极强', True),
        (_counts(wood=3, water=2, fire=1, earth=1, metal=1), '偏强', True),
        (_counts(wood=3, water=1, fire=1, earth=2, metal=1), '中和', True),
        (_counts(wood=2, water=1, fire=2, earth=1, metal=1), '中和', False),
        (_counts(wood=2, water=1, fire=2, earth=2, metal=1), '偏弱', False),
        (_counts(wood=1, water=1, fire=2, earth=2, metal=1), '偏弱', False),
        (_counts(wood=1, water=1, fire=2, earth=2, metal=2), '极弱', False),
    ], ids=["diff+4", "diff+2", "diff0", "diff-1", "diff-2", "diff-3", "diff-4"])
    def test_labels(self, counts, label, is_strong):
        strength = WuxingBalanceAnalyzer.calculate_day_master_strength('木', counts)
        assert strength.strength_label == label
        assert strength.is_strong is is_strong

    def test_counts_reported(self):
        strength = WuxingBalanceAnalyzer.calculate_day_master_strength('木', _counts(wood=3, water=1, fire=2, earth=1, metal=1))
        assert strength.same_type_count == 4
        assert strength.different_type_count == 4

    def test_monotonic(self):
        """同类增加时强弱等级不下降"""
        rank = ['极弱', '偏弱', '中和', '偏强', '极强']
        previous = None
        for wood in range(0, 9):
            strength = WuxingBalanceAnalyzer.calculate_day_master_strength('木', _counts(wood=wood, fire=2, metal=2))
            current = (strength.is_strong, rank.index(strength.strength_label))
            if previous is not None:
                assert current >= previous
            previous = current

    def test_invalid_element(self):
        with pytest.raises(ValueError):
            WuxingBalanceAnalyzer.calculate_day_master_strength('风', _counts())


class TestFavorableElements:
    def test_strong_day_master(self):
        strength = WuxingBalanceAnalyzer.calculate_day_master_strength('木', _counts(wood=3, water=2, fire=1, earth=1, metal=1))
        favorable = WuxingBalanceAnalyzer.calculate_favorable_elements('木', strength)
        assert favorable.favorable == ['火', '金', '土']
        assert favorable.unfavorable == ['水', '木']
        assert favorable.explanation == '日主偏强，喜泄耗，忌生扶'

    def test_weak_day_master(self):
        strength = WuxingBalanceAnalyzer.calculate_day_master_strength('火', _counts(fire=1, water=3, metal=2, earth=2))
        favorable = WuxingBalanceAnalyzer.calculate_favorable_elements('火', strength)
        assert favorable.favorable == ['木', '火']
        assert '喜生扶' in favorable.explanation

    @pytest.mark.parametrize("element", FIVE_ELEMENTS)
    def test_disjoint(self, element):
        strength = WuxingBalanceAnalyzer.calculate_day_master_strength(element, _counts(wood=2, fire=2, earth=2, metal=1, water=1))
        favorable = WuxingBalanceAnalyzer.calculate_favorable_elements(element, strength)
        assert set(favorable.favorable).isdisjoint(favorable.unfavorable)
        assert set(favorable.favorable) | set(favorable.unfavorable) == set(FIVE_ELEMENTS)


class TestAnalyze:
    def test_day_master_info(self):
        info = WuxingBalanceAnalyzer.get_day_master_info('己')
        assert info.display_name == '己土'
        assert WuxingBalanceAnalyzer.get_day_master_info('X') is None

    def test_analyze(self):
        result = WuxingBalanceAnalyzer.analyze(['庚', '辛', '甲', '己'], ['午', '巳', '子', '巳'])
        assert sum(result['counts'].values()) == 8
        assert result['day_master'].stem == '甲'
        assert result['strength'] is not None
        assert result['favorable'] is not None
        assert set(result['labels']) == set(FIVE_ELEMENTS)
