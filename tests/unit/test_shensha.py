#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""神煞引擎单元测试"""

import pytest

from core.calculators.shensha import RULES, TYPE_ORDER, calculate_shensha
from core.data.constants import PILLAR_LABELS
from core.models import Pillar


def _pillars(*ganzhi):
    return [Pillar(heavenly_stem=g[0], earthly_branch=g[1]) for g in ganzhi]


def _find(result, name):
    return [item for item in result if item.name == name]


CHARTS = [
    ('庚午', '辛巳', '庚辰', '辛巳'),
    ('己巳', '丁丑', '甲子', '庚午'),
    ('甲辰', '甲戌', '乙丑', '丙寅'),
    ('甲午', '乙酉', '丙子', '丁卯'),
    ('壬子', '癸卯', '辛酉', '戊午'),
]


class TestFixtures:
    def test_tianyi_guiren(self):
        """甲日见丑为天乙贵人"""
        result = calculate_shensha(*_pillars('乙丑', '丙寅', '甲子', '丁卯'))
        [item] = _find(result, '天乙贵人')
        assert item.type == '吉'
        assert item.positions == ['年柱']

    def test_tianyi_guiren_wei(self):
        result = calculate_shensha(*_pillars('乙亥', '丙寅', '甲子', '辛未'))
        [item] = _find(result, '天乙贵人')
        assert '时柱' in item.positions

    def test_kuigang(self):
        """日柱庚辰为魁罡，只标日柱"""
        result = calculate_shensha(*_pillars('甲子', '丙寅', '庚辰', '丁亥'))
        [item] = _find(result, '魁罡')
        assert item.positions == ['日柱']

    def test_tianluo_diwang(self):
        """年支辰、月支戌同见为天罗地网"""
        result = calculate_shensha(*_pillars('甲辰', '甲戌', '乙丑', '丙寅'))
        [item] = _find(result, '天罗地网')
        assert item.type == '凶'
        assert item.positions == ['年柱', '月柱']

    def test_tianshang_sanqi(self):
        """年月日天干甲戊庚"""
        result = calculate_shensha(*_pillars('甲子', '戊寅', '庚辰', '丙子'))
        [item] = _find(result, '天上三奇')
        assert item.type == '吉'
        assert item.positions == ['年柱', '月柱', '日柱']

    def test_tianshang_sanqi_from_month(self):
        """月日时天干甲戊庚"""
        result = calculate_shensha(*_pillars('丙子', '甲寅', '戊辰', '庚午'))
        [item] = _find(result, '天上三奇')
        assert item.positions == ['月柱', '日柱', '时柱']

    def test_sanqi_needs_order(self):
        result = calculate_shensha(*_pillars('庚子', '戊寅', '甲辰', '丙子'))
        assert not _find(result, '天上三奇')


class TestPunishment:
    def test_full_triad(self):
        """寅巳申俱全为三刑"""
        result = calculate_shensha(*_pillars('甲寅', '己巳', '庚申', '丙子'))
        [item] = _find(result, '三刑')
        assert item.positions == ['年柱', '月柱', '日柱']

    def test_partial_triad(self):
        """只见寅巳不成三刑"""
        result = calculate_shensha(*_pillars('甲寅', '己巳', '庚子', '丙子'))
        assert not _find(result, '三刑')

    def test_zi_mao(self):
        result = calculate_shensha(*_pillars('甲子', '丁卯', '庚辰', '丙戌'))
        [item] = _find(result, '子卯相刑')
        assert item.positions == ['年柱', '月柱']


class TestPeachBlossom:
    def test_variants(self):
        """日支子见酉、年支午见卯"""
        result = calculate_shensha(*_pillars('甲午', '乙酉', '丙子', '丁卯'))
        assert _find(result, '桃花')[0].positions == ['月柱', '时柱']
        assert _find(result, '墙内桃花')[0].positions == ['月柱']
        assert _find(result, '墙外桃花')[0].positions == ['时柱']
        assert _find(result, '遍野桃花')[0].positions == ['年柱', '月柱', '日柱', '时柱']

    def test_daocha(self):
        """年支为日支之桃花"""
        result = calculate_shensha(*_pillars('乙酉', '丙寅', '甲子', '丙寅'))
        assert _find(result, '倒插桃花')[0].positions == ['年柱']


class TestBranchLookups:
    @pytest.mark.parametrize("chart,expected", [
        (('甲申', '丙寅', '庚申', '甲申'), ['日柱', '时柱']),
        (('甲寅', '丙子', '甲午', '庚申'), ['日柱']),
        (('甲子', '丙寅', '甲辰', '庚申'), ['时柱']),
    ], ids=["day-and-hour", "day-only", "hour-only"])
    def test_yuepo_day_and_hour_only(self, chart, expected):
        """月破只看日柱、时柱，年柱同为冲支也不计"""
        [item] = _find(calculate_shensha(*_pillars(*chart)), '月破')
        assert item.type == '凶'
        assert item.positions == expected

    def test_suipo_excludes_year(self):
        """年支子冲午，月柱、时柱见午"""
        [item] = _find(calculate_shensha(*_pillars('甲子', '庚午', '丙寅', '甲午')), '岁破')
        assert item.positions == ['月柱', '时柱']

    def test_guchen_excludes_year(self):
        """年支子，孤辰在寅"""
        [item] = _find(calculate_shensha(*_pillars('甲子', '丙寅', '庚寅', '甲寅')), '孤辰')
        assert item.positions == ['月柱', '日柱', '时柱']

    def test_guchen_month(self):
        result = calculate_shensha(*_pillars('甲亥', '丙寅', '甲子', '庚午'))
        assert _find(result, '孤辰')[0].positions == ['月柱']

    def test_guasu_excludes_year(self):
        """年支子，寡宿在戌"""
        [item] = _find(calculate_shensha(*_pillars('甲子', '甲戌', '丙戌', '庚寅')), '寡宿')
        assert item.positions == ['月柱', '日柱']

    @pytest.mark.parametrize("chart,kong,jielu", [
        (('甲戌', '乙亥', '甲子', '乙亥'), ['年柱', '月柱', '时柱'], ['时柱']),
        (('甲戌', '丙寅', '甲子', '乙亥'), ['年柱', '时柱'], ['时柱']),
        (('甲子', '丁丑', '甲寅', '庚午'), ['年柱', '月柱'], None),
    ], ids=["jiazi-xun-three", "jiazi-xun-two", "jiayin-xun"])
    def test_kongwang(self, chart, kong, jielu):
        """日柱所在旬的空亡；截路空亡只看时柱"""
        result = calculate_shensha(*_pillars(*chart))
        assert _find(result, '截空')[0].positions == kong
        if jielu is None:
            assert not _find(result, '截路空亡')
        else:
            assert _find(result, '截路空亡')[0].positions == jielu


class TestSeasonal:
    @pytest.mark.parametrize("chart", [
        ('甲子', '丙寅', '戊寅', '庚午'),
        ('甲子', '丙午', '甲午', '庚申'),
        ('甲子', '丙子', '甲子', '庚午'),
        ('甲子', '丙戌', '戊辰', '庚午'),
    ], ids=["spring", "summer", "winter", "earth-month"])
    def test_tianshe(self, chart):
        """天赦只标日柱"""
        [item] = _find(calculate_shensha(*_pillars(*chart)), '天赦')
        assert item.type == '吉'
        assert item.positions == ['日柱']

    @pytest.mark.parametrize("chart", [
        ('甲子', '丙寅', '甲午', '庚申'),
        ('甲子', '壬申', '戊寅', '庚午'),
    ], ids=["wrong-day", "wrong-season"])
    def test_tianshe_absent(self, chart):
        assert not _find(calculate_shensha(*_pillars(*chart)), '天赦')

    def test_sifei(self):
        """春月庚申日为四废"""
        [item] = _find(calculate_shensha(*_pillars('甲子', '丙寅', '庚申', '丙子')), '四废')
        assert item.positions == ['日柱']

    def test_sifei_needs_season(self):
        """庚申日生于秋月不为四废"""
        assert not _find(calculate_shensha(*_pillars('甲子', '壬申', '庚申', '丙子')), '四废')


class TestMonthVirtue:
    @pytest.mark.parametrize("name,chart,expected", [
        ('天德贵人', ('丁丑', '丙寅', '甲辰', '庚午'), ['年柱']),
        ('天德贵人', ('甲子', '丁卯', '庚申', '丙子'), ['日柱']),
        ('天德合', ('壬子', '甲寅', '甲辰', '庚午'), ['年柱']),
        ('月德贵人', ('丙子', '甲寅', '甲辰', '庚午'), ['年柱']),
        ('月德合', ('辛丑', '甲寅', '甲辰', '庚午'), ['年柱']),
    ], ids=["tiande-stem", "tiande-branch", "tiande-he", "yuede", "yuede-he"])
    def test_found(self, name, chart, expected):
        """月支查天干（天德部分月份查地支）"""
        [item] = _find(calculate_shensha(*_pillars(*chart)), name)
        assert item.type == '吉'
        assert item.positions == expected

    def test_tiande_branch_in_you_month(self):
        """酉月天德在寅支"""
        result = calculate_shensha(*_pillars('甲寅', '癸酉', '庚子', '丙子'))
        assert _find(result, '天德贵人')[0].positions == ['年柱']

    def test_no_tiande_he_for_branch_month(self):
        """卯月天德为地支，无合神"""
        result = calculate_shensha(*_pillars('甲子', '丁卯', '庚申', '丙子'))
        assert not _find(result, '天德合')


class TestRepeatedAndPairs:
    def test_zixing_and_fuyin(self):
        """辰、子各重复一次：自刑只计辰，伏吟按地支分组"""
        result = calculate_shensha(*_pillars('甲辰', '丙子', '庚辰', '丙子'))
        assert _find(result, '自刑')[0].positions == ['年柱', '日柱']
        assert _find(result, '伏吟')[0].positions == ['年柱', '日柱', '月柱', '时柱']

    def test_no_repeats(self):
        result = calculate_shensha(*_pillars('甲子', '丙寅', '庚辰', '丙午'))
        assert not _find(result, '自刑')
        assert not _find(result, '伏吟')

    @pytest.mark.parametrize("chart,expected", [
        (('甲子', '庚午', '丙寅', '甲申'), ['年柱', '月柱', '日柱', '时柱']),
        (('甲子', '丙寅', '庚午', '丁卯'), ['年柱', '日柱']),
    ], ids=["two-pairs", "one-pair"])
    def test_fanyin(self, chart, expected):
        [item] = _find(calculate_shensha(*_pillars(*chart)), '反吟')
        assert item.positions == expected

    def test_liuhai(self):
        """子未相害"""
        result = calculate_shensha(*_pillars('甲子', '辛未', '丙寅', '丁酉'))
        assert _find(result, '六害')[0].positions == ['年柱', '月柱']


class TestDayPillar:
    @pytest.mark.parametrize("name,day,type_", [
        ('阴阳差错', '丙子', '凶'),
        ('十恶大败', '甲辰', '凶'),
        ('六秀日', '丙午', '吉'),
        ('六秀日', '癸酉', '吉'),
        ('八专日', '甲寅', '中'),
        ('八专日', '壬子', '中'),
    ], ids=["yinyang-chacuo", "shie-dabai", "liuxiu-bingwu", "liuxiu-guiyou", "bazhuan-jiayin", "bazhuan-renzi"])
    def test_day_pillar_rules(self, name, day, type_):
        """只标日柱"""
        [item] = _find(calculate_shensha(*_pillars('甲子', '丙寅', day, '庚午')), name)
        assert item.type == type_
        assert item.positions == ['日柱']

    def test_ordinary_day(self):
        result = calculate_shensha(*_pillars('甲子', '丙寅', '庚午', '丙子'))
        for name in ('阴阳差错', '十恶大败', '六秀日', '八专日'):
            assert not _find(result, name)


class TestLu:
    def test_split_by_pillar(self):
        """甲禄在寅：月柱建禄、日柱专禄、时柱归禄"""
        result = calculate_shensha(*_pillars('甲子', '丙寅', '甲寅', '丙寅'))
        assert _find(result, '禄神')[0].positions == ['月柱', '日柱', '时柱']
        assert _find(result, '建禄')[0].positions == ['月柱']
        assert _find(result, '专禄')[0].positions == ['日柱']
        assert _find(result, '归禄')[0].positions == ['时柱']

    def test_hour_only(self):
        result = calculate_shensha(*_pillars('甲子', '丁卯', '甲辰', '丙寅'))
        assert _find(result, '归禄')[0].positions == ['时柱']
        assert not _find(result, '建禄')
        assert not _find(result, '专禄')


class TestEngineInvariants:
    @pytest.mark.parametrize("chart", CHARTS, ids=['-'.join(c) for c in CHARTS])
    def test_sorted_by_type(self, chart):
        """吉在前、中居中、凶在后"""
        result = calculate_shensha(*_pillars(*chart))
        ranks = [TYPE_ORDER[item.type] for item in result]
        assert ranks == sorted(ranks)

    @pytest.mark.parametrize("chart", CHARTS, ids=['-'.join(c) for c in CHARTS])
    def test_deterministic(self, chart):
        first = calculate_shensha(*_pillars(*chart))
        second = calculate_shensha(*_pillars(*chart))
        assert first == second

    @pytest.mark.parametrize("chart", CHARTS, ids=['-'.join(c) for c in CHARTS])
    def test_positions_valid(self, chart):
        labels = set(PILLAR_LABELS.values())
        for item in calculate_shensha(*_pillars(*chart)):
            assert item.positions
            assert set(item.positions) <= labels
            assert item.description

    def test_rule_registry(self):
        assert len(RULES) == 113
        assert all(rule.type in TYPE_ORDER for rule in RULES)

    def test_same_type_keeps_rule_order(self):
        result = calculate_shensha(*_pillars('庚午', '辛巳', '庚辰', '辛巳'))
        order = [rule.name for rule in RULES]
        for type_ in TYPE_ORDER:
            names = [item.name for item in result if item.type == type_]
            indexes = [order.index(name) for name in names]
            assert indexes == sorted(indexes)


class TestFailSoft:
    @pytest.mark.parametrize("chart,field", [
        (('X子', '丙寅', '甲子', '丁卯'), '年干'),
        (('甲子', '丙寅', '甲Z', '丁卯'), '日支'),
        (('甲子', '丙寅', '甲子', '丁'), '时支'),
    ], ids=["year-stem", "day-branch", "hour-branch-missing"])
    def test_invalid_symbol_returns_empty(self, chart, field):
        warnings = []
        pillars = [Pillar(heavenly_stem=g[0], earthly_branch=g[1:2] or None) for g in chart]
        assert calculate_shensha(*pillars, warn=warnings.append) == []
        assert len(warnings) == 1
        assert field in warnings[0]

    def test_object_without_attributes(self):
        assert calculate_shensha(object(), object(), object(), object()) == []

    def test_warn_sink_errors_swallowed(self):
        """警告回调出错不影响返回"""
        def broken(message):
            raise RuntimeError(message)

        result = calculate_shensha(*_pillars('X子', '丙寅', '甲子', '丁卯'), warn=broken)
        assert result == []
