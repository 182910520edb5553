"""Static katakana tables: characters, categories, names, words, tiers.

Stroke segments are (x1, y1, x2, y2) on a 200x200 reference grid and are
only used to draw stroke-order guides.
"""

from __future__ import annotations

from katakana_quiz.models import (
    CategoryInfo,
    CharacterEntry,
    DifficultyTier,
    NameEntry,
    WordEntry,
)

# glyph, romanization, category, strokes
_CHARACTER_ROWS = [
    # Vowels
    ("ア", "a", "basic", [(70, 30, 70, 150), (70, 30, 130, 30), (70, 80, 120, 80)]),
    ("イ", "i", "basic", [(50, 30, 50, 150), (90, 30, 90, 150), (50, 80, 90, 80)]),
    ("ウ", "u", "basic", [(50, 30, 120, 30), (70, 30, 70, 80), (70, 80, 110, 120), (50, 120, 120, 120)]),
    ("エ", "e", "basic", [(50, 30, 120, 30), (50, 80, 120, 80), (50, 120, 120, 120)]),
    ("オ", "o", "basic", [(50, 30, 120, 30), (50, 30, 50, 120), (70, 80, 120, 80), (120, 80, 120, 120)]),
    # K row
    ("カ", "ka", "k-sounds", [(50, 30, 120, 30), (50, 30, 50, 120), (70, 80, 120, 80)]),
    ("キ", "ki", "k-sounds", [(50, 30, 50, 150), (70, 50, 100, 30), (70, 100, 100, 150)]),
    ("ク", "ku", "k-sounds", [(50, 30, 120, 80), (90, 60, 90, 150)]),
    ("ケ", "ke", "k-sounds", [(50, 30, 120, 30), (50, 80, 120, 80), (70, 120, 120, 150)]),
    ("コ", "ko", "k-sounds", [(50, 30, 120, 30), (50, 120, 120, 120)]),
    # S row
    ("サ", "sa", "s-sounds", [(50, 30, 120, 30), (70, 30, 70, 120), (50, 120, 120, 120)]),
    ("シ", "shi", "s-sounds", [(60, 50, 80, 30), (80, 80, 100, 60), (100, 120, 120, 100)]),
    ("ス", "su", "s-sounds", [(50, 30, 120, 50), (70, 80, 110, 80), (90, 80, 90, 150)]),
    ("セ", "se", "s-sounds", [(50, 30, 120, 30), (70, 80, 110, 80), (50, 120, 120, 150)]),
    ("ソ", "so", "s-sounds", [(60, 30, 80, 50), (90, 80, 110, 100)]),
    # T row
    ("タ", "ta", "t-sounds", [(50, 30, 120, 30), (70, 80, 110, 80), (90, 80, 90, 150)]),
    ("チ", "chi", "t-sounds", [(50, 30, 120, 50), (70, 80, 110, 80), (90, 80, 90, 150)]),
    ("ツ", "tsu", "t-sounds", [(60, 30, 80, 50), (90, 80, 110, 100), (50, 120, 120, 120)]),
    ("テ", "te", "t-sounds", [(50, 30, 120, 30), (70, 80, 110, 80), (50, 120, 120, 120)]),
    ("ト", "to", "t-sounds", [(50, 30, 120, 50), (90, 50, 90, 150)]),
    # N row
    ("ナ", "na", "n-sounds", [(50, 30, 120, 30), (70, 30, 70, 120), (50, 80, 120, 80)]),
    ("ニ", "ni", "n-sounds", [(50, 50, 120, 50), (50, 120, 120, 120)]),
    ("ヌ", "nu", "n-sounds", [(60, 30, 90, 30), (60, 30, 60, 80), (60, 80, 100, 120), (70, 120, 120, 150)]),
    ("ネ", "ne", "n-sounds", [(50, 30, 120, 30), (70, 30, 70, 80), (70, 80, 110, 120), (50, 120, 120, 120)]),
    ("ノ", "no", "n-sounds", [(60, 30, 120, 150)]),
    # H row
    ("ハ", "ha", "h-sounds", [(50, 30, 50, 150), (90, 30, 90, 150), (70, 80, 70, 150)]),
    ("ヒ", "hi", "h-sounds", [(50, 30, 50, 150), (90, 30, 90, 150), (50, 80, 90, 80)]),
    ("フ", "fu", "h-sounds", [(50, 30, 120, 30), (70, 80, 110, 80)]),
    ("ヘ", "he", "h-sounds", [(60, 30, 120, 150)]),
    ("ホ", "ho", "h-sounds", [(50, 30, 120, 30), (50, 30, 50, 120), (70, 80, 120, 80), (120, 30, 120, 120)]),
    # M row
    ("マ", "ma", "m-sounds", [(50, 30, 120, 30), (70, 30, 70, 120), (50, 80, 120, 80)]),
    ("ミ", "mi", "m-sounds", [(50, 50, 120, 50), (60, 80, 100, 80), (70, 120, 110, 120)]),
    ("ム", "mu", "m-sounds", [(50, 30, 120, 80), (90, 60, 90, 150)]),
    ("メ", "me", "m-sounds", [(60, 30, 120, 150), (120, 30, 60, 150)]),
    ("モ", "mo", "m-sounds", [(50, 30, 120, 30), (70, 80, 110, 80), (50, 120, 120, 120), (90, 80, 90, 120)]),
    # Y row
    ("ヤ", "ya", "y-sounds", [(50, 30, 120, 30), (70, 30, 70, 80), (70, 80, 110, 120), (50, 120, 110, 120)]),
    ("ユ", "yu", "y-sounds", [(50, 30, 100, 50), (70, 80, 110, 80), (50, 120, 120, 120)]),
    ("ヨ", "yo", "y-sounds", [(50, 30, 120, 30), (70, 80, 110, 80), (50, 120, 120, 120), (90, 80, 90, 120)]),
    # R row
    ("ラ", "ra", "r-sounds", [(50, 30, 120, 30), (70, 30, 70, 120), (70, 80, 120, 80)]),
    ("リ", "ri", "r-sounds", [(50, 30, 50, 150), (90, 30, 90, 150)]),
    ("ル", "ru", "r-sounds", [(50, 30, 100, 30), (60, 30, 60, 80), (60, 80, 100, 120), (70, 120, 120, 150)]),
    ("レ", "re", "r-sounds", [(50, 30, 120, 150)]),
    ("ロ", "ro", "r-sounds", [(50, 30, 120, 30), (50, 30, 50, 120), (120, 30, 120, 120), (50, 120, 120, 120)]),
    # W row and the syllabic n
    ("ワ", "wa", "w-sounds", [(50, 30, 120, 30), (70, 30, 70, 80), (70, 80, 110, 120), (50, 120, 110, 120)]),
    ("ヲ", "wo", "w-sounds", [(50, 30, 120, 30), (70, 30, 70, 120), (50, 80, 120, 80), (90, 80, 90, 120)]),
    ("ン", "n", "n-sound", [(50, 30, 50, 120), (90, 30, 50, 150)]),
]

CHARACTERS: tuple[CharacterEntry, ...] = tuple(
    CharacterEntry(glyph=g, romanization=r, category=c, strokes=tuple(s))
    for g, r, c, s in _CHARACTER_ROWS
)

CATEGORIES: tuple[CategoryInfo, ...] = (
    CategoryInfo(tag="basic", name="Basic Vowels", description="あ、い、う、え、お sounds"),
    CategoryInfo(tag="k-sounds", name="K Sounds", description="か、き、く、け、こ sounds"),
    CategoryInfo(tag="s-sounds", name="S Sounds", description="さ、し、す、せ、そ sounds"),
    CategoryInfo(tag="t-sounds", name="T Sounds", description="た、ち、つ、て、と sounds"),
    CategoryInfo(tag="n-sounds", name="N Sounds", description="な、に、ぬ、ね、の sounds"),
    CategoryInfo(tag="h-sounds", name="H Sounds", description="は、ひ、ふ、へ、ほ sounds"),
    CategoryInfo(tag="m-sounds", name="M Sounds", description="ま、み、む、め、も sounds"),
    CategoryInfo(tag="y-sounds", name="Y Sounds", description="や、ゆ、よ sounds"),
    CategoryInfo(tag="r-sounds", name="R Sounds", description="ら、り、る、れ、ろ sounds"),
    CategoryInfo(tag="w-sounds", name="W Sounds", description="わ、を sounds"),
    CategoryInfo(tag="n-sound", name="N Sound", description="ん sound"),
)

NAMES: tuple[NameEntry, ...] = tuple(
    NameEntry(english=e, katakana=k, romanization=r)
    for e, k, r in [
        ("Michael", "マイケル", "maikeru"),
        ("Izzul", "イズル", "izuru"),
        ("Hizkia", "ヒズキア", "hizukia"),
        ("Fadel", "ファデル", "faderu"),
        ("Sarah", "サラ", "sara"),
        ("David", "デイビッド", "deibiddo"),
        ("Maria", "マリア", "maria"),
        ("John", "ジョン", "jon"),
        ("Anna", "アンナ", "anna"),
        ("Robert", "ロバート", "robaato"),
        ("Lisa", "リサ", "risa"),
        ("Tom", "トム", "tomu"),
        ("Emily", "エミリー", "emirii"),
        ("Daniel", "ダニエル", "danieru"),
        ("Jessica", "ジェシカ", "jeshika"),
    ]
)

WORDS: tuple[WordEntry, ...] = tuple(
    WordEntry(word=w, romanization=r, meaning=m, blanks=tuple(b))
    for w, r, m, b in [
        ("コンピューター", "konpyuutaa", "computer", [2, 5]),
        ("テレビ", "terebi", "television", [1]),
        ("カメラ", "kamera", "camera", [0]),
        ("ホテル", "hoteru", "hotel", [2]),
        ("レストラン", "resutoran", "restaurant", [1, 4]),
        ("タクシー", "takushii", "taxi", [3]),
        ("バス", "basu", "bus", [0]),
        ("メニュー", "menyuu", "menu", [2]),
        ("サラダ", "sarada", "salad", [1]),
        ("コーヒー", "koohii", "coffee", [3]),
    ]
)

DIFFICULTY_TIERS: tuple[DifficultyTier, ...] = (
    DifficultyTier(level=1, name="Beginner", categories=("basic",), question_count=5),
    DifficultyTier(
        level=2,
        name="Elementary",
        categories=("basic", "k-sounds", "s-sounds"),
        question_count=8,
    ),
    DifficultyTier(
        level=3,
        name="Intermediate",
        categories=("basic", "k-sounds", "s-sounds", "t-sounds", "n-sounds"),
        question_count=10,
    ),
    DifficultyTier(
        level=4,
        name="Advanced",
        categories=(
            "k-sounds",
            "s-sounds",
            "t-sounds",
            "n-sounds",
            "h-sounds",
            "m-sounds",
        ),
        question_count=12,
    ),
    DifficultyTier(
        level=5,
        name="Expert",
        categories=tuple(c.tag for c in CATEGORIES),
        question_count=15,
    ),
)
