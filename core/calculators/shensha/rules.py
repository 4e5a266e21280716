#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
神煞规则注册表

RULES 的顺序即输出中同一吉凶类型内部的顺序，不可随意调整。
"""

from dataclasses import dataclass

from core.data import shensha_tables as t
from core.data.relations import BRANCH_XING, BRANCH_ZIXING
from core.models import ShenShaType

from .evaluators import (
    DAY, HOUR, MONTH, YEAR,
    Evaluator,
    all_present,
    bath_with_peach_blossom,
    both_present,
    by_day_branch,
    by_day_or_year_branch,
    by_day_stem,
    by_month_branch,
    by_year_branch,
    clashing_pairs,
    day_pillar_by_season,
    day_pillar_in,
    harming_pairs,
    hour_pillar_in,
    kongwang,
    peach_blossom,
    repeated_branches,
    stem_by_month_branch,
    stem_combine_branch_punish,
    stem_sequence,
)


@dataclass(frozen=True)
class ShenShaRule:
    name: str
    type: ShenShaType
    description: str
    evaluate: Evaluator


RULES = (
    ShenShaRule('天乙贵人', '吉', '逢凶化吉、遇难呈祥，主贵人相助', by_day_stem(t.TIANYI_GUIREN)),
    ShenShaRule('文昌贵人', '吉', '主聪明智慧、学业有成、利于考试', by_day_stem(t.WENCHANG)),
    ShenShaRule('桃花', '中', '主人缘佳、异性缘好，但须防桃色纠纷', by_day_or_year_branch(t.TAOHUA)),
    ShenShaRule('驿马', '中', '主奔波劳碌、适合外出发展、有迁移变动', by_day_or_year_branch(t.YIMA)),
    ShenShaRule('华盖', '中', '主聪明孤傲、适合艺术宗教、喜独处研究', by_day_or_year_branch(t.HUAGAI)),
    ShenShaRule('将星', '吉', '主领导能力强、有权威、适合管理职位', by_day_or_year_branch(t.JIANGXING)),
    ShenShaRule('禄神', '吉', '主衣食无忧、财禄丰厚、福气绵长', by_day_stem(t.LUSHEN)),
    ShenShaRule('羊刃', '凶', '主性格刚烈、易有血光之灾、须防意外伤害', by_day_stem(t.YANGREN)),
    ShenShaRule('天德贵人', '吉', '主逢凶化吉、一生平安、有贵人扶持',
                stem_by_month_branch(t.TIANDE, include_branches=True)),
    ShenShaRule('月德贵人', '吉', '主品德高尚、处事平顺、有福德庇佑', stem_by_month_branch(t.YUEDE)),
    ShenShaRule('金舆', '吉', '主出行平安、有车马之福、利于交通', by_day_stem(t.JINYU)),
    ShenShaRule('劫煞', '凶', '主易有劫难、须防小人暗害、谨慎理财', by_day_or_year_branch(t.JIESHA)),
    ShenShaRule('亡神', '凶', '主心神不宁、易有是非口舌、须防暗耗', by_day_or_year_branch(t.WANGSHEN)),
    ShenShaRule('孤辰', '凶', '主孤独寂寞、男命克妻、宜晚婚', by_year_branch(t.GUCHEN, exclude_year=True)),
    ShenShaRule('寡宿', '凶', '主孤独寂寞、女命克夫、宜晚婚', by_year_branch(t.GUASU, exclude_year=True)),
    ShenShaRule('天厨贵人', '吉', '主食禄丰厚、衣食无缺、生活富足', by_day_stem(t.TIANCHU)),
    ShenShaRule('福星贵人', '吉', '主福气临门、一生平安、遇事有救', by_day_stem(t.FUXING)),
    ShenShaRule('国印贵人', '吉', '主掌印信权柄、适合公职、有官运', by_day_stem(t.GUOYIN)),
    ShenShaRule('学堂', '吉', '主聪明好学、学业有成、文采出众', by_day_stem(t.XUETANG)),
    ShenShaRule('词馆', '吉', '主文采斐然、能言善辩、利于文职', by_day_stem(t.CIGUAN)),
    ShenShaRule('魁罡', '中', '主性格刚毅、有胆识魄力、但须防刚愎自用', day_pillar_in(t.KUIGANG)),
    ShenShaRule('天罗地网', '凶', '主易遇困阻、诸事不顺、须防官非诉讼', both_present(t.TIANLUO, t.DIWANG)),
    ShenShaRule('灾煞', '凶', '主灾祸临身、须防水火之灾、谨慎行事', by_day_or_year_branch(t.ZAISHA)),
    ShenShaRule('天煞', '凶', '主意外灾祸、须防飞来横祸、宜谨慎', by_day_or_year_branch(t.TIANSHA)),
    ShenShaRule('地煞', '凶', '主地面灾害、须防跌伤摔伤、出行谨慎', by_day_or_year_branch(t.DISHA)),
    ShenShaRule('红艳煞', '中', '主风流多情、异性缘佳、但须防感情纠葛', by_day_stem(t.HONGYAN)),
    ShenShaRule('流霞煞', '凶', '主血光之灾、女命须防难产、男命防意外', by_day_stem(t.LIUXIA)),
    ShenShaRule('血刃', '凶', '主血光之灾、须防刀伤手术、谨慎行事', by_day_stem(t.XUEREN)),
    ShenShaRule('天医', '吉', '主适合医疗行业、身体康健、逢病可愈', by_month_branch(t.TIANYI_DOCTOR)),
    ShenShaRule('太极贵人', '吉', '主近贵得福、智慧超群、适合玄学研究', by_day_stem(t.TAIJI)),
    ShenShaRule('天上三奇', '吉', '主天赋异禀、聪明绝顶、适合研究学问', stem_sequence(t.SANQI['天上三奇'])),
    ShenShaRule('地上三奇', '吉', '主得地利之便、事业顺遂、财运亨通', stem_sequence(t.SANQI['地上三奇'])),
    ShenShaRule('人中三奇', '吉', '主人缘广阔、贵人相助、处世圆融', stem_sequence(t.SANQI['人中三奇'])),
    ShenShaRule('天喜', '吉', '主喜事临门、婚姻美满、添丁进财', by_year_branch(t.TIANXI)),
    ShenShaRule('红鸾', '吉', '主姻缘和合、喜事连连、利于婚嫁', by_year_branch(t.HONGLUAN)),
    ShenShaRule('天赦', '吉', '主逢凶化吉、罪过可赦、贵人相助', day_pillar_by_season(t.TIANSHE)),
    ShenShaRule('阴阳差错', '凶', '主婚姻不顺、夫妻易有隔阂、感情多波折', day_pillar_in(t.YINYANG_CHACUO)),
    ShenShaRule('十恶大败', '凶', '主钱财难聚、事业多阻、须防破败', day_pillar_in(t.SHIE_DABAI)),
    ShenShaRule('月德合', '吉', '主品德高尚、处事平顺、为月德之合神', stem_by_month_branch(t.YUEDE_HE)),
    ShenShaRule('天德合', '吉', '主逢凶化吉、贵人相助、为天德之合神', stem_by_month_branch(t.TIANDE_HE)),
    ShenShaRule('六秀日', '吉', '主聪明秀气、才华出众、气质非凡', day_pillar_in(t.LIUXIU)),
    ShenShaRule('八专日', '中', '主专一之气、性格执着、感情专注但须防固执', day_pillar_in(t.BAZHUAN)),
    ShenShaRule('吊客', '凶', '主丧服之事、须防亲友有难、宜谨慎行事', by_year_branch(t.DIAOKE)),
    ShenShaRule('天狗', '凶', '主是非口舌、易有意外、须防血光之灾', by_year_branch(t.TIANGOU)),
    ShenShaRule('截空', '凶', '主空虚不实、事多阻滞、但亦主超脱世俗', kongwang()),
    ShenShaRule('沐浴', '中', '主风流多情、桃花旺盛、须防感情纠纷', by_day_stem(t.MUYU)),
    ShenShaRule('月破', '凶', '主诸事不顺、易有破败、不宜进取', by_month_branch(t.SUIPO, pillars=(DAY, HOUR))),
    ShenShaRule('隔角', '凶', '主六亲缘薄、易有隔阂、人际关系需注意', by_year_branch(t.GEJIAO, exclude_year=True)),
    ShenShaRule('元辰', '凶', '主耗散破败、诸事不顺、须谨慎理财', by_year_branch(t.YUANCHEN)),
    ShenShaRule('玉堂贵人', '吉', '主福禄双全、名利双收、有贵人提携', by_day_stem(t.YUTANG)),
    ShenShaRule('文曲贵人', '吉', '主文采出众、才思敏捷、利于科举考试', by_day_stem(t.WENQU)),
    ShenShaRule('建禄', '吉', '主自立成家、财禄丰盈、事业有成', by_day_stem(t.LUSHEN, pillars=(MONTH,))),
    ShenShaRule('归禄', '吉', '主晚年富贵、子孙贤孝、福禄归身', by_day_stem(t.LUSHEN, pillars=(HOUR,))),
    ShenShaRule('专禄', '吉', '主专心事业、财禄专一、不宜投机', by_day_stem(t.LUSHEN, pillars=(DAY,))),
    ShenShaRule('岁破', '凶', '主破耗损财、诸事不顺、宜守不宜攻', by_year_branch(t.SUIPO, exclude_year=True)),
    ShenShaRule('大耗', '凶', '主财物耗损、破财败业、须防盗窃', by_year_branch(t.DAHAO)),
    ShenShaRule('小耗', '凶', '主小破财、暗中耗损、宜节俭', by_year_branch(t.XIAOHAO)),
    ShenShaRule('丧门', '凶', '主丧服之事、须防孝服、家宅不宁', by_year_branch(t.SANGMEN)),
    ShenShaRule('披麻', '凶', '主麻烦缠身、须防孝服、忧患多见', by_year_branch(t.PIMA)),
    ShenShaRule('白虎', '凶', '主血光意外、须防刀伤车祸、宜谨慎行事', by_year_branch(t.BAIHU)),
    ShenShaRule('官符', '凶', '主官非诉讼、须防口舌是非、避免争执', by_year_branch(t.GUANFU)),
    ShenShaRule('五鬼', '凶', '主小人暗害、是非口舌、须防阴谋诡计', by_year_branch(t.WUGUI)),
    ShenShaRule('死符', '凶', '主疾病缠身、健康不佳、须注意保养', by_year_branch(t.SIFU)),
    ShenShaRule('龙德', '吉', '主逢凶化吉、龙德庇佑、遇难呈祥', by_month_branch(t.LONGDE)),
    ShenShaRule('孤鸾煞', '凶', '主婚姻不顺、夫妻易分离、宜晚婚', day_pillar_in(t.GULUAN)),
    ShenShaRule('四废', '凶', '主力不从心、事业多阻、难有成就', day_pillar_by_season(t.SIFEI)),
    ShenShaRule('天元坐煞', '凶', '主性格急躁、易有冲突、须防意外', day_pillar_in(t.TIANYUAN_ZUOSHA)),
    ShenShaRule('金神', '中', '主性格刚毅、有煞气、须见火制化为吉', hour_pillar_in(t.JINSHEN)),
    ShenShaRule('三刑', '凶', '主刑伤灾祸、须防意外伤害、宜谨慎行事', all_present(BRANCH_XING['寅巳申'])),
    ShenShaRule('三刑', '凶', '主刑伤灾祸、六亲不和、宜修养德行', all_present(BRANCH_XING['丑戌未'])),
    ShenShaRule('子卯相刑', '凶', '主无礼之刑、易有口舌是非', all_present(BRANCH_XING['子卯'])),
    ShenShaRule('自刑', '凶', '主自我刑伤、心性不定、易钻牛角尖', repeated_branches(BRANCH_ZIXING)),
    ShenShaRule('六害', '凶', '主六亲不和、易有害人之事、防小人', harming_pairs()),
    ShenShaRule('贯索', '凶', '主牢狱之灾、官非缠身、须防诉讼', by_year_branch(t.GUANSUO)),
    ShenShaRule('飞廉', '凶', '主奔波劳碌、东奔西走、难得安宁', by_year_branch(t.FEILIAN)),
    ShenShaRule('罗睺', '凶', '主阴谋诡计、暗中破害、须防小人', by_year_branch(t.LUOHOU)),
    ShenShaRule('计都', '凶', '主计谋多端、心机深沉、须防阴谋', by_year_branch(t.JIDU)),
    ShenShaRule('天哭', '凶', '主悲伤哭泣、忧郁多愁、须防忧患', by_year_branch(t.TIANKU)),
    ShenShaRule('天虚', '凶', '主虚耗不实、事多落空、难有实效', by_year_branch(t.TIANXU)),
    ShenShaRule('紫微', '吉', '主尊贵显赫、权威在握、利于仕途', by_year_branch(t.ZIWEI)),
    ShenShaRule('凤阁', '吉', '主文采风流、气质优雅、利于文职', by_month_branch(t.FENGGE)),
    ShenShaRule('月将', '吉', '主领导统御、权威在握、利于管理', by_month_branch(t.YUEJIANG)),
    ShenShaRule('豹尾', '凶', '主凶恶暴戾、易有血光、须防意外', by_year_branch(t.BAOWEI)),
    ShenShaRule('黄幡', '凶', '主丧服之事、须防孝服、家宅不安', by_year_branch(t.HUANGFAN)),
    ShenShaRule('飞刃', '凶', '主血光意外、须防刀伤手术、宜谨慎', by_day_stem(t.FEIREN)),
    ShenShaRule('伏吟', '凶', '主重复不顺、事多反复、难有进展', repeated_branches(group_by_branch=True)),
    ShenShaRule('反吟', '凶', '主变动不安、事多反复、宜静不宜动', clashing_pairs()),
    ShenShaRule('铁扫帚', '凶', '主破财败业、钱财难聚、宜节俭', by_month_branch(t.TIESAZHOU)),
    ShenShaRule('截路空亡', '凶', '主前路受阻、难有发展', kongwang(pillars=(HOUR,))),
    ShenShaRule('九丑', '凶', '主容貌不佳、气质欠佳、宜修养德行', day_pillar_in(t.JIUCHOU)),
    ShenShaRule('阑干', '凶', '主阻隔不通、事多障碍、难有突破', by_year_branch(t.LANGAN)),
    ShenShaRule('暴败', '凶', '主突然败落、钱财难守、宜谨慎', day_pillar_in(t.BAOBAI)),
    ShenShaRule('浮沉', '凶', '主浮沉不定、事业起伏、难有稳定', by_year_branch(t.FUCHEN)),
    ShenShaRule('指背', '凶', '主背后是非、易遭诽谤、须防小人', by_year_branch(t.ZHIBEI)),
    ShenShaRule('卷舌', '凶', '主口舌是非、言语不慎、易惹争端', by_year_branch(t.JUANSHE)),
    ShenShaRule('伏尸', '凶', '主疾病缠身、健康不佳、须注意保养', by_year_branch(t.FUSHI)),
    ShenShaRule('吞陷煞', '凶', '主陷入困境、难以自拔、须谨慎行事', by_day_stem(t.TUNXIAN)),
    ShenShaRule('破碎煞', '凶', '主破财损物、器物易损、宜小心保管', by_year_branch(t.POSUI)),
    ShenShaRule('往亡', '凶', '主出行不利、易有意外、宜减少远行', by_day_branch(t.WANGWANG)),
    ShenShaRule('归忌', '凶', '主回归不利、返程多阻、宜慎重选择', by_day_branch(t.GUIJI)),
    ShenShaRule('天火', '凶', '主火灾之患、须防火烛、注意用火安全', by_day_stem(t.TIANHUO)),
    ShenShaRule('剑锋煞', '凶', '主刀剑之灾、须防意外伤害、宜谨慎', by_day_stem(t.JIANFENG)),
    ShenShaRule('悬针煞', '凶', '主性格执着、易钻牛角尖、须防固执', day_pillar_in(t.XUANZHEN)),
    ShenShaRule('平头煞', '凶', '主干支相克、内外不和、多有矛盾', day_pillar_in(t.PINGTOU)),
    ShenShaRule('六厄', '凶', '主灾厄连连、困难重重、须谨慎应对', by_year_branch(t.LIUE)),
    ShenShaRule('岁刑', '凶', '主刑伤灾祸、须防意外、宜谨慎', by_year_branch(t.SUIXING, exclude_year=True)),
    ShenShaRule('墙内桃花', '中', '主配偶貌美、夫妻恩爱、家庭和睦', peach_blossom(pillars=(YEAR, MONTH))),
    ShenShaRule('墙外桃花', '中', '主外遇之象、须防感情纠葛', peach_blossom(pillars=(DAY, HOUR))),
    ShenShaRule('遍野桃花', '中', '主风流成性、桃花泛滥、宜自律', all_present(t.SIZHENG)),
    ShenShaRule('倒插桃花', '中', '主早年桃花、少年风流、宜注意感情', by_day_branch(t.TAOHUA, pillars=(YEAR,))),
    ShenShaRule('沐浴咸池', '中', '主桃花旺盛、异性缘佳、须防感情纠纷', bath_with_peach_blossom()),
    ShenShaRule('裸体桃花', '中', '主桃花外露、易招桃色是非', by_day_stem(t.MUYU, pillars=(DAY, HOUR))),
    ShenShaRule('滚浪桃花', '中', '主桃花奔波、四处留情、宜自律', stem_combine_branch_punish()),
)

TYPE_ORDER = {'吉': 0, '中': 1, '凶': 2}
