#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
神煞通用判定器

每个工厂函数接收查询表，返回判定函数 evaluate(chart) -> List[str]，
结果为命中的柱位名称列表（按固定顺序，空列表表示不成立）。
神煞规则只是 (名称, 吉凶, 说明, 判定函数) 的组合，见 rules.py。
"""

from dataclasses import dataclass
from typing import Callable, Iterable, List, Mapping, Sequence, Tuple

from core.data.constants import PILLAR_LABELS, PILLAR_NAMES
from core.data.relations import BRANCH_CHONG, BRANCH_HAI, STEM_HE
from core.data.shensha_tables import JIAZI_TO_XUN, KONGWANG, MUYU, TAOHUA

YEAR, MONTH, DAY, HOUR = range(4)
ALL_PILLARS = (YEAR, MONTH, DAY, HOUR)
POSITIONS = tuple(PILLAR_LABELS[name] for name in PILLAR_NAMES)


@dataclass(frozen=True)
class FourPillars:
    """四柱干支（已校验）"""
    stems: Tuple[str, str, str, str]
    branches: Tuple[str, str, str, str]

    @property
    def day_stem(self) -> str:
        return self.stems[DAY]

    @property
    def year_branch(self) -> str:
        return self.branches[YEAR]

    @property
    def month_branch(self) -> str:
        return self.branches[MONTH]

    @property
    def day_branch(self) -> str:
        return self.branches[DAY]

    @property
    def hour_branch(self) -> str:
        return self.branches[HOUR]

    @property
    def day_pillar(self) -> str:
        return self.stems[DAY] + self.branches[DAY]

    @property
    def hour_pillar(self) -> str:
        return self.stems[HOUR] + self.branches[HOUR]


Evaluator = Callable[[FourPillars], List[str]]


def _as_targets(value) -> Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(value)


def _unique(positions: Iterable[str]) -> List[str]:
    result = []
    for position in positions:
        if position not in result:
            result.append(position)
    return result


def branch_positions(chart: FourPillars, targets: Sequence[str],
                     pillars: Sequence[int] = ALL_PILLARS) -> List[str]:
    """地支落在 targets 中的柱位"""
    if not targets:
        return []
    return [POSITIONS[i] for i in pillars if chart.branches[i] in targets]


def stem_positions(chart: FourPillars, targets: Sequence[str]) -> List[str]:
    """天干落在 targets 中的柱位"""
    if not targets:
        return []
    return [POSITIONS[i] for i in ALL_PILLARS if chart.stems[i] in targets]


# ==================== 查表类 ====================

def by_day_stem(table: Mapping, pillars: Sequence[int] = ALL_PILLARS) -> Evaluator:
    """以日干查目标地支（单个或多个）"""
    def evaluate(chart):
        return branch_positions(chart, _as_targets(table.get(chart.day_stem)), pillars)
    return evaluate


def by_day_branch(table: Mapping, pillars: Sequence[int] = ALL_PILLARS) -> Evaluator:
    def evaluate(chart):
        return branch_positions(chart, _as_targets(table.get(chart.day_branch)), pillars)
    return evaluate


def by_year_branch(table: Mapping, exclude_year: bool = False) -> Evaluator:
    """以年支查目标地支；exclude_year 时年柱本身不计"""
    pillars = (MONTH, DAY, HOUR) if exclude_year else ALL_PILLARS

    def evaluate(chart):
        return branch_positions(chart, _as_targets(table.get(chart.year_branch)), pillars)
    return evaluate


def by_month_branch(table: Mapping, pillars: Sequence[int] = ALL_PILLARS) -> Evaluator:
    def evaluate(chart):
        return branch_positions(chart, _as_targets(table.get(chart.month_branch)), pillars)
    return evaluate


def by_day_or_year_branch(table: Mapping, pillars: Sequence[int] = ALL_PILLARS) -> Evaluator:
    """三合局类：日支、年支分别查表，任一命中即成立"""
    def evaluate(chart):
        targets = _as_targets(table.get(chart.day_branch)) + _as_targets(table.get(chart.year_branch))
        return branch_positions(chart, targets, pillars)
    return evaluate


def stem_by_month_branch(table: Mapping, include_branches: bool = False) -> Evaluator:
    """
    以月支查目标天干

    Args:
        table: 月支 -> 天干（天德表中部分目标为地支）
        include_branches: 同时检查四柱地支，结果为天干柱位在前、地支柱位在后
    """
    def evaluate(chart):
        targets = _as_targets(table.get(chart.month_branch))
        positions = stem_positions(chart, targets)
        if include_branches:
            positions = _unique(positions + branch_positions(chart, targets))
        return positions
    return evaluate


# ==================== 干支组合类 ====================

def day_pillar_in(values: Sequence[str]) -> Evaluator:
    """日柱干支属于固定列表"""
    def evaluate(chart):
        return [POSITIONS[DAY]] if chart.day_pillar in values else []
    return evaluate


def hour_pillar_in(values: Sequence[str]) -> Evaluator:
    def evaluate(chart):
        return [POSITIONS[HOUR]] if chart.hour_pillar in values else []
    return evaluate


def day_pillar_by_season(table: Sequence[Tuple[Sequence[str], Sequence[str]]]) -> Evaluator:
    """月支所属季节 + 日柱组合（天赦、四废）"""
    def evaluate(chart):
        for month_branches, day_pillars in table:
            if chart.month_branch in month_branches and chart.day_pillar in day_pillars:
                return [POSITIONS[DAY]]
        return []
    return evaluate


def stem_sequence(order: Sequence[str]) -> Evaluator:
    """年月日时天干中顺序连续出现 order（三奇），返回首个窗口"""
    def evaluate(chart):
        size = len(order)
        for start in range(len(chart.stems) - size + 1):
            if tuple(chart.stems[start:start + size]) == tuple(order):
                return list(POSITIONS[start:start + size])
        return []
    return evaluate


def stem_combine_branch_punish(pair: Sequence[str] = ('子', '卯')) -> Evaluator:
    """日时天干相合且地支相刑（滚浪桃花）"""
    def evaluate(chart):
        if STEM_HE.get(chart.day_stem) != chart.stems[HOUR]:
            return []
        if {chart.day_branch, chart.hour_branch} != set(pair):
            return []
        return [POSITIONS[DAY], POSITIONS[HOUR]]
    return evaluate


# ==================== 地支组合类 ====================

def both_present(first: str, second: str) -> Evaluator:
    """两个地支同时出现，柱位为 first 所在柱在前、second 所在柱在后"""
    def evaluate(chart):
        first_positions = branch_positions(chart, (first,))
        second_positions = branch_positions(chart, (second,))
        if not first_positions or not second_positions:
            return []
        return _unique(first_positions + second_positions)
    return evaluate


def all_present(members: Sequence[str]) -> Evaluator:
    """members 中每个地支都至少出现一次（不要求不同柱）"""
    def evaluate(chart):
        if not set(members).issubset(chart.branches):
            return []
        return branch_positions(chart, members)
    return evaluate


def repeated_branches(candidates: Sequence[str] = None, group_by_branch: bool = False) -> Evaluator:
    """
    地支重复出现（自刑、伏吟）

    Args:
        candidates: 仅检查这些地支；None 表示全部
        group_by_branch: 按地支首次出现顺序分组输出柱位
    """
    def evaluate(chart):
        repeated = [
            i for i in ALL_PILLARS
            if chart.branches.count(chart.branches[i]) >= 2
            and (candidates is None or chart.branches[i] in candidates)
        ]
        if group_by_branch:
            order = _unique(chart.branches[i] for i in repeated)
            repeated = [i for branch in order for i in repeated if chart.branches[i] == branch]
        return [POSITIONS[i] for i in repeated]
    return evaluate


def clashing_pairs(table: Mapping = BRANCH_CHONG) -> Evaluator:
    """两两检查地支相冲（反吟）"""
    def evaluate(chart):
        positions = []
        for i in ALL_PILLARS:
            for j in range(i + 1, len(ALL_PILLARS)):
                if table.get(chart.branches[i]) == chart.branches[j]:
                    positions.extend([POSITIONS[i], POSITIONS[j]])
        return _unique(positions)
    return evaluate


def harming_pairs(table: Mapping = BRANCH_HAI) -> Evaluator:
    """地支与其他柱构成六害的柱位"""
    def evaluate(chart):
        positions = []
        for i in ALL_PILLARS:
            partner = table.get(chart.branches[i])
            if any(chart.branches[j] == partner for j in ALL_PILLARS if j != i):
                positions.append(POSITIONS[i])
        return positions
    return evaluate


def kongwang(pillars: Sequence[int] = ALL_PILLARS) -> Evaluator:
    """日柱所在旬的两个空亡地支"""
    def evaluate(chart):
        xun = JIAZI_TO_XUN.get(chart.day_pillar)
        return branch_positions(chart, KONGWANG.get(xun, ()), pillars)
    return evaluate


def peach_blossom(pillars: Sequence[int] = ALL_PILLARS) -> Evaluator:
    """日支或年支所见桃花落在指定柱位"""
    return by_day_or_year_branch(TAOHUA, pillars)


def bath_with_peach_blossom() -> Evaluator:
    """日干沐浴之支恰为桃花（沐浴咸池）"""
    def evaluate(chart):
        target = MUYU.get(chart.day_stem)
        blossoms = (TAOHUA.get(chart.day_branch), TAOHUA.get(chart.year_branch))
        if target is None or target not in blossoms:
            return []
        return branch_positions(chart, (target,))
    return evaluate
