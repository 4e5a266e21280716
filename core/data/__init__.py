# -*- coding: utf-8 -*-
"""
八字静态数据模块

干支五行、藏干、纳音、城市以及神煞查询表。
"""
