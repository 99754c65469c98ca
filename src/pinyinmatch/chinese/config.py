"""
中文拼音配置模組

定義去聲調映射、元音集合、合法音節表與多音字讀音表。
所有表格於建置時固定，不從外部資料載入。
"""


def _expand(initial: str, finals: str) -> set:
    return {initial + final for final in finals.split()}


class ChinesePinyinConfig:
    """
    中文拼音配置（類別屬性即常數，不需實例化）
    """

    # =========================================================================
    # 1. 聲調符號 → 基本字母
    # =========================================================================
    # 五個聲調符號的 ü 一律映射為 v，方便 ASCII 輸入比對
    TONE_MARKS = {
        "ā": "a", "á": "a", "ǎ": "a", "à": "a",
        "ē": "e", "é": "e", "ě": "e", "è": "e",
        "ī": "i", "í": "i", "ǐ": "i", "ì": "i",
        "ō": "o", "ó": "o", "ǒ": "o", "ò": "o",
        "ū": "u", "ú": "u", "ǔ": "u", "ù": "u",
        "ǖ": "v", "ǘ": "v", "ǚ": "v", "ǜ": "v", "ü": "v",
    }

    # =========================================================================
    # 2. 元音（v 代替 ü）
    # =========================================================================
    VOWELS = frozenset("aeiouv")

    # =========================================================================
    # 3. 合法單音節（無聲調，ü 記作 v）
    # =========================================================================
    # 空格分隔後的 token 若是單一音節，直接取首字母；
    # 否則視為黏連的多音節片段，改用元音邊界規則切分。
    VALID_SYLLABLES = frozenset(
        set("a o e ai ei ao ou an en ang eng er m n ng hm".split())
        | _expand("b", "a o i u ai ei ao an en ang eng ie iao ian in ing")
        | _expand("p", "a o i u ai ei ao ou an en ang eng ie iao ian in ing")
        | _expand("m", "a o e i u ai ei ao ou an en ang eng ie iao iu ian in ing")
        | _expand("f", "a o u ei ou an en ang eng")
        | _expand("d", "a e i u ai ei ao ou an en ang eng ong ia ie iao iu ian ing uo ui uan un")
        | _expand("t", "a e i u ai ao ou an ang eng ong ie iao ian ing uo ui uan un")
        | _expand("n", "a e i u v ai ei ao ou an en ang eng ong ie iao iu ian in iang ing uo uan ve un")
        | _expand("l", "a o e i u v ai ei ao ou an ang eng ong ia ie iao iu ian in iang ing uo uan un ve")
        | _expand("g", "a e u ai ei ao ou an en ang eng ong ua uo uai ui uan un uang")
        | _expand("k", "a e u ai ei ao ou an en ang eng ong ua uo uai ui uan un uang")
        | _expand("h", "a e u ai ei ao ou an en ang eng ong ua uo uai ui uan un uang")
        | _expand("j", "i ia ie iao iu ian in iang ing iong u ue uan un")
        | _expand("q", "i ia ie iao iu ian in iang ing iong u ue uan un")
        | _expand("x", "i ia ie iao iu ian in iang ing iong u ue uan un")
        | _expand("zh", "a e i u ai ei ao ou an en ang eng ong ua uo uai ui uan un uang")
        | _expand("ch", "a e i u ai ao ou an en ang eng ong ua uo uai ui uan un uang")
        | _expand("sh", "a e i u ai ei ao ou an en ang eng ua uo uai ui uan un uang")
        | _expand("r", "e i u ao ou an en ang eng ong ua uo ui uan un")
        | _expand("z", "a e i u ai ei ao ou an en ang eng ong uo ui uan un")
        | _expand("c", "a e i u ai ao ou an en ang eng ong uo ui uan un")
        | _expand("s", "a e i u ai ao ou an en ang eng ong uo ui uan un")
        | _expand("y", "a o e i u ao ou an in ang ing ong ue uan un")
        | _expand("w", "a o u ai ei an en ang eng")
    )

    # =========================================================================
    # 4. 多音字讀音表（變體展開策略使用）
    # =========================================================================
    # 每個字的有效讀音集合 = 基礎表預設讀音 ∪ 本表讀音（去重，預設讀音在前）
    HETERONYM_READINGS = {
        "的": ("de", "di"),
        "着": ("zhe", "zhao", "zhuo"),
        "了": ("le", "liao"),
        "还": ("hai", "huan"),
        "都": ("dou", "du"),
        "会": ("hui", "kuai"),
        "没": ("mei", "mo"),
        "重": ("zhong", "chong"),
        "长": ("chang", "zhang"),
        "地": ("di", "de"),
        "行": ("xing", "hang"),
        "种": ("zhong", "chong"),
        "大": ("da", "dai"),
        "单": ("dan", "shan"),
        "解": ("jie", "xie"),
        "得": ("de", "dei"),
        "乐": ("le", "yue"),
        "钥": ("yao", "yue"),
        "匙": ("shi", "chi"),
        "调": ("diao", "tiao"),
        "藏": ("cang", "zang"),
        "弹": ("dan", "tan"),
        "朝": ("chao", "zhao"),
        "曾": ("ceng", "zeng"),
        "降": ("jiang", "xiang"),
        "传": ("chuan", "zhuan"),
        "模": ("mo", "mu"),
        "率": ("lv", "shuai"),
        "省": ("sheng", "xing"),
        "差": ("cha", "chai", "ci"),
        "参": ("can", "shen", "cen"),
        "便": ("bian", "pian"),
        "觉": ("jue", "jiao"),
        "血": ("xue", "xie"),
        "薄": ("bo", "bao"),
        "露": ("lu", "lou"),
        "称": ("cheng", "chen"),
        "角": ("jiao", "jue"),
        "校": ("xiao", "jiao"),
        "盛": ("sheng", "cheng"),
        "石": ("shi", "dan"),
        "宿": ("su", "xiu"),
        "系": ("xi", "ji"),
        "卡": ("ka", "qia"),
        "壳": ("ke", "qiao"),
        "剥": ("bo", "bao"),
        "扎": ("zha", "za"),
        "炮": ("pao", "bao"),
        "落": ("luo", "la", "lao"),
        "给": ("gei", "ji"),
        "佛": ("fo", "fu"),
    }

    # =========================================================================
    # 5. 分詞預設值
    # =========================================================================
    DEFAULT_MAX_PHRASE_LENGTH = 4
    MIN_PHRASE_LENGTH = 2
