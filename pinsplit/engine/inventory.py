"""
音节表模块

功能：
1. 全部合法无调拼音音节（小写、去声调、保留 ü）
2. 成员判定
3. 从 JSON 文件加载自定义音节表
"""

import os
from typing import FrozenSet, Iterable

import orjson

from .normalizer import fold_syllable


# 所有有效音节（无调）
SYLLABLES: FrozenSet[str] = frozenset({
    # 零声母（含叹词 m、r）
    'a', 'ai', 'an', 'ang', 'ao', 'e', 'ei', 'en', 'eng', 'er', 'o', 'ou', 'm', 'r',

    # b
    'ba', 'bai', 'ban', 'bang', 'bao', 'bei', 'ben', 'beng', 'bi', 'bia', 'bian',
    'biang', 'biao', 'bie', 'bin', 'bing', 'bo', 'bu',

    # p
    'pa', 'pai', 'pan', 'pang', 'pao', 'pei', 'pen', 'peng', 'pi', 'pian', 'piao',
    'pie', 'pin', 'ping', 'po', 'pou', 'pu',

    # m
    'ma', 'mai', 'man', 'mang', 'mao', 'me', 'mei', 'men', 'meng', 'mi', 'mian',
    'miao', 'mie', 'min', 'ming', 'miu', 'mo', 'mou', 'mu',

    # f
    'fa', 'fan', 'fang', 'fei', 'fen', 'feng', 'fiao', 'fo', 'fou', 'fu',

    # d
    'da', 'dai', 'dan', 'dang', 'dao', 'de', 'dei', 'den', 'deng', 'di', 'dia',
    'dian', 'diao', 'die', 'ding', 'diu', 'dong', 'dou', 'du', 'duan', 'dui',
    'dun', 'duo',

    # t
    'ta', 'tai', 'tan', 'tang', 'tao', 'te', 'tei', 'teng', 'ti', 'tian', 'tiao',
    'tie', 'ting', 'tong', 'tou', 'tu', 'tuan', 'tui', 'tun', 'tuo',

    # n
    'na', 'nai', 'nan', 'nang', 'nao', 'ne', 'nei', 'nen', 'neng', 'ni', 'nian',
    'niang', 'niao', 'nie', 'nin', 'ning', 'niu', 'nong', 'nou', 'nu', 'nuan',
    'nun', 'nuo', 'nü', 'nüe',

    # l
    'la', 'lai', 'lan', 'lang', 'lao', 'le', 'lei', 'leng', 'li', 'lia', 'lian',
    'liang', 'liao', 'lie', 'lin', 'ling', 'liu', 'lo', 'long', 'lou', 'lu',
    'luan', 'lun', 'luo', 'lü', 'lüe',

    # g
    'ga', 'gai', 'gan', 'gang', 'gao', 'ge', 'gei', 'gen', 'geng', 'gong', 'gou',
    'gu', 'gua', 'guai', 'guan', 'guang', 'gui', 'gun', 'guo',

    # k
    'ka', 'kai', 'kan', 'kang', 'kao', 'ke', 'kei', 'ken', 'keng', 'kong', 'kou',
    'ku', 'kua', 'kuai', 'kuan', 'kuang', 'kui', 'kun', 'kuo',

    # h
    'ha', 'hai', 'han', 'hang', 'hao', 'he', 'hei', 'hen', 'heng', 'hong', 'hou',
    'hu', 'hua', 'huai', 'huan', 'huang', 'hui', 'hun', 'huo',

    # j
    'ji', 'jia', 'jian', 'jiang', 'jiao', 'jie', 'jin', 'jing', 'jiong', 'jiu',
    'ju', 'juan', 'jue', 'jun',

    # q
    'qi', 'qia', 'qian', 'qiang', 'qiao', 'qie', 'qin', 'qing', 'qiong', 'qiu',
    'qu', 'quan', 'que', 'qun',

    # x
    'xi', 'xia', 'xian', 'xiang', 'xiao', 'xie', 'xin', 'xing', 'xiong', 'xiu',
    'xu', 'xuan', 'xue', 'xun',

    # zh
    'zha', 'zhai', 'zhan', 'zhang', 'zhao', 'zhe', 'zhei', 'zhen', 'zheng', 'zhi',
    'zhong', 'zhou', 'zhu', 'zhua', 'zhuai', 'zhuan', 'zhuang', 'zhui', 'zhun',
    'zhuo',

    # ch
    'cha', 'chai', 'chan', 'chang', 'chao', 'che', 'chen', 'cheng', 'chi',
    'chong', 'chou', 'chu', 'chua', 'chuai', 'chuan', 'chuang', 'chui', 'chun',
    'chuo',

    # sh
    'sha', 'shai', 'shan', 'shang', 'shao', 'she', 'shei', 'shen', 'sheng',
    'shi', 'shou', 'shu', 'shua', 'shuai', 'shuan', 'shuang', 'shui', 'shun',
    'shuo',

    # r
    'ran', 'rang', 'rao', 're', 'ren', 'reng', 'ri', 'rong', 'rou', 'ru', 'rua',
    'ruan', 'rui', 'run', 'ruo',

    # z
    'za', 'zai', 'zan', 'zang', 'zao', 'ze', 'zei', 'zen', 'zeng', 'zi', 'zong',
    'zou', 'zu', 'zuan', 'zui', 'zun', 'zuo',

    # c
    'ca', 'cai', 'can', 'cang', 'cao', 'ce', 'cen', 'ceng', 'ci', 'cong', 'cou',
    'cu', 'cuan', 'cui', 'cun', 'cuo',

    # s
    'sa', 'sai', 'san', 'sang', 'sao', 'se', 'sei', 'sen', 'seng', 'si', 'song',
    'sou', 'su', 'suan', 'sui', 'sun', 'suo',

    # y
    'ya', 'yan', 'yang', 'yao', 'ye', 'yi', 'yin', 'ying', 'yo', 'yong', 'you',
    'yu', 'yuan', 'yue', 'yun',

    # w
    'wa', 'wai', 'wan', 'wang', 'wei', 'wen', 'weng', 'wo', 'wu',
})

# 最长音节长度（zhuang / chuang / shuang）
MAX_SYLLABLE_LENGTH = max(len(s) for s in SYLLABLES)


def is_valid_syllable(syllable: str, inventory: FrozenSet[str] = SYLLABLES) -> bool:
    """检查带调/大小写的音节折叠后是否在音节表中"""
    return fold_syllable(syllable) in inventory


def is_valid_sequence(syllables: Iterable[str], inventory: FrozenSet[str] = SYLLABLES) -> bool:
    """检查音节序列是否全部有效"""
    return all(is_valid_syllable(s, inventory) for s in syllables)


def load_inventory(path: str) -> FrozenSet[str]:
    """
    从 JSON 文件加载音节表

    支持两种格式：
    - 列表: ["a", "ai", ...]
    - 对象: {"a": [...], "ai": [...]}（只取键，兼容拼音→汉字词典）

    Args:
        path: JSON 文件路径

    Returns:
        折叠后的音节集合
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"音节表文件不存在: {path}")

    with open(path, 'rb') as f:
        data = orjson.loads(f.read())

    if isinstance(data, dict):
        entries = data.keys()
    elif isinstance(data, list):
        entries = data
    else:
        raise ValueError(f"音节表格式错误，应为列表或对象: {path}")

    return frozenset(
        fold_syllable(entry.strip())
        for entry in entries
        if isinstance(entry, str) and entry.strip()
    )
