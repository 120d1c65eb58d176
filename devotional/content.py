# devotional/content.py
"""
Static devotional corpus (NKJV references only, no verse text).

Order inside every tuple is significant: the generator indexes into them by
position, so reordering or inserting items changes which content a date maps to.
"""
from __future__ import annotations

from typing import Dict, Tuple

CATEGORIES: Tuple[str, ...] = ("Marriage", "Blended Family", "Children", "Parents", "Grandchildren")

ALL = "All"

# category -> {focuses, scriptures: (ref, idea), prayers, prompts}
MODULES: Dict[str, Dict[str, tuple]] = {
    "Marriage": {
        "focuses": (
            "God at the center",
            "Unity and agreement",
            "Christlike love",
            "Communication and understanding",
            "Forgiveness and healing",
            "Faithfulness and protection",
            "Gratitude and renewal",
            "Friendship and joy",
            "Healthy conflict resolution",
            "Respect and honor",
            "Intimacy and tenderness",
            "Servant leadership",
            "Financial unity and stewardship",
            "Time, priorities, and boundaries",
            "Prayer partnership",
        ),
        "scriptures": (
            ("Ecclesiastes 4:12", "God strengthens a covenant"),
            ("Amos 3:3", "Walking in agreement"),
            ("Ephesians 5:25", "Sacrificial love"),
            ("James 1:19", "Listen before speaking"),
            ("Colossians 3:13", "Forgive as Christ forgave"),
            ("Proverbs 4:23", "Guard the heart"),
            ("Psalm 103:2", "Remember God’s benefits"),
            ("1 Corinthians 13:4–7", "Love’s character"),
            ("Proverbs 15:1", "Gentle answer turns away wrath"),
            ("Ephesians 4:2–3", "Keep unity in peace"),
        ),
        "prayers": (
            "Lord, be the center of our marriage. Establish our covenant in Your strength.",
            "Unite our hearts and give us one mind in Christ.",
            "Teach us to love sacrificially and consistently.",
            "Guard our words; make us quick to listen and slow to speak.",
            "Help us forgive quickly and restore trust with wisdom.",
            "Protect our marriage from temptation, distraction, and division.",
            "Renew our joy and friendship. Rekindle tenderness and respect.",
            "Guide our decisions and align our priorities with Your will.",
        ),
        "prompts": (
            "What would it look like for God to be more central in our marriage this week?",
            "Where do we need clearer unity or better communication?",
            "Is there anything we need to forgive or address gently and directly?",
            "What is one practical way I can honor my spouse today?",
            "What boundary or habit would strengthen our relationship?",
        ),
    },
    "Blended Family": {
        "focuses": (
            "Unity and peace in the home",
            "Grace for transitions",
            "Healing past wounds",
            "Healthy boundaries",
            "Respect between households",
            "Consistency and stability",
            "Communication with kindness",
            "Steadfast love and patience",
            "Shared family culture",
            "Godly influence and protection",
        ),
        "scriptures": (
            ("Psalm 133:1", "Dwelling together in unity"),
            ("Colossians 3:12–14", "Compassion and love"),
            ("Romans 12:18", "Live peaceably as possible"),
            ("James 1:19", "Listen and respond wisely"),
            ("Psalm 147:3", "Heals the brokenhearted"),
            ("Ephesians 4:29", "Words that build up"),
            ("Proverbs 3:5–6", "Guidance for decisions"),
        ),
        "prayers": (
            "Lord, establish peace in our home and unity within our blended family.",
            "Give us grace for transitions and patience in the process.",
            "Heal wounds from the past and help us build a new culture of love.",
            "Teach us healthy boundaries and wise communication with all involved.",
            "Give our children security, stability, and confidence in Your love.",
        ),
        "prompts": (
            "Where do we need more patience and grace in our blended family?",
            "What is one step we can take to build safety and stability for the children?",
            "Are there boundaries that need to be clarified in love?",
            "How can we speak words that build rather than divide?",
        ),
    },
    "Children": {
        "focuses": (
            "Peace and emotional stability",
            "Wisdom and discernment",
            "Salvation and spiritual hunger",
            "Protection and godly friends",
            "Purpose and identity in Christ",
            "Obedience and teachability",
            "Healing and restoration",
            "Courage and faith",
            "Integrity and character",
            "Healthy decision-making",
            "Freedom from fear",
            "Respect and honor",
        ),
        "scriptures": (
            ("Isaiah 54:13", "Taught by the Lord; great peace"),
            ("Proverbs 22:6", "Train up a child"),
            ("Acts 16:31", "Believe and be saved"),
            ("Psalm 91:11", "Angelic protection"),
            ("Jeremiah 29:11", "Future and hope"),
            ("James 1:5", "Wisdom from God"),
            ("2 Timothy 1:7", "Power, love, sound mind"),
            ("Psalm 139:14", "Wonderfully made"),
        ),
        "prayers": (
            "Lord, teach our children Your ways and establish peace in them.",
            "Give them wisdom, discernment, and godly friends.",
            "Protect them from harm and from influences that pull them from You.",
            "Reveal their identity and purpose in Christ.",
            "Draw them into sincere faith and a love for Your Word.",
        ),
        "prompts": (
            "Which child (or area) needs focused prayer today, and why?",
            "What virtue do we want to model more clearly as parents?",
            "What protective boundary or routine would help our children thrive?",
            "How can we speak life and purpose over our children today?",
        ),
    },
    "Parents": {
        "focuses": (
            "Honor and patience",
            "Health and strength",
            "Peace and comfort",
            "Salvation and spiritual growth",
            "Reconciliation and restored relationships",
            "Wisdom for decisions",
            "Provision and stability",
            "Legacy and generational faith",
        ),
        "scriptures": (
            ("Exodus 20:12", "Honor father and mother"),
            ("3 John 1:2", "Health and well-being"),
            ("Psalm 32:8", "Guidance and instruction"),
            ("Psalm 145:4", "One generation praises another"),
            ("Romans 12:18", "Live peaceably"),
            ("Philippians 4:19", "God supplies needs"),
            ("Isaiah 46:4", "God carries in old age"),
        ),
        "prayers": (
            "Lord, help us honor our parents with love, patience, and humility.",
            "Strengthen them in body and mind; surround them with peace.",
            "Where relationships are strained, bring reconciliation and healing.",
            "Draw them close to You and deepen their faith.",
        ),
        "prompts": (
            "What does honoring our parents look like in this season?",
            "Is there a practical act of care we can offer this week?",
            "Is there anything we need to forgive or address for reconciliation?",
            "What legacy of faith do we want to continue?",
        ),
    },
    "Grandchildren": {
        "focuses": (
            "Blessing and favor",
            "Protection and innocence",
            "Early love for God",
            "Wisdom and joyful growth",
            "Future paths and callings",
            "Healthy friendships and mentors",
            "Peace and stability",
            "Generational blessing",
        ),
        "scriptures": (
            ("Psalm 127:3", "Children are a heritage"),
            ("Proverbs 22:6", "Train up a child"),
            ("Matthew 18:10", "God’s care for little ones"),
            ("Psalm 103:17", "Mercy to children’s children"),
            ("Psalm 37:23", "The Lord orders steps"),
            ("Isaiah 54:13", "Great peace"),
            ("Luke 2:52", "Grow in wisdom and favor"),
        ),
        "prayers": (
            "Lord, bless our grandchildren with wisdom, protection, and joy.",
            "Guard their hearts and minds; keep them safe and anchored in truth.",
            "Plant an early love for You and a hunger for Your Word.",
            "Order their steps and prepare their future callings.",
        ),
        "prompts": (
            "What specific blessing do we want to speak over our grandchildren today?",
            "Where do they need protection (physically, emotionally, spiritually)?",
            "What faith practices can we model or share with them?",
            "What hopes are we entrusting to God for their future?",
        ),
    },
}

# Appended after the category's own steps when picking an action step
COMMON_ACTION_STEPS: Tuple[str, ...] = (
    "Pray aloud together for 2 minutes each.",
    "Share one gratitude and one need with gentleness.",
    "Send one encouraging text to your spouse today.",
    "Schedule 20 minutes to talk without distractions.",
    "Write down one area to surrender to God and pray over it.",
)

ACTION_STEPS: Dict[str, Tuple[str, ...]] = {
    "Marriage": (
        "Do one small act of honor for your spouse today (quietly, just love).",
        "Ask: “What would make you feel supported this week?” and listen fully.",
        "Bless your spouse out loud with a short prayer before bed.",
        "Apologize quickly for anything the Holy Spirit brings to mind.",
    ),
    "Blended Family": (
        "Choose one moment today to respond with extra patience and calm.",
        "Discuss one boundary that would increase stability for the children.",
        "Speak one affirming sentence to each child today.",
        "Pray for unity across households with humility and wisdom.",
    ),
    "Children": (
        "Speak one blessing over a child by name (even if they are not present).",
        "Ask a child a heart question: “How are you really doing?”",
        "Pray specifically for godly friends and mentors for your children.",
        "Model one Christlike response in a stressful moment.",
    ),
    "Parents": (
        "Reach out to a parent/in-law with encouragement or practical support.",
        "Pray for health and peace specifically by name.",
        "If appropriate, take one step toward reconciliation with wisdom.",
        "Honor your parents with words today—choose respect over criticism.",
    ),
    "Grandchildren": (
        "Pray blessings over your grandchildren by name.",
        "Share one faith story with a grandchild (age-appropriate).",
        "Pray for their future callings and protection.",
        "Speak peace and identity over them (loved, safe, and seen by God).",
    ),
}


def action_pool(category: str) -> Tuple[str, ...]:
    return ACTION_STEPS.get(category, ()) + COMMON_ACTION_STEPS


def is_category(value: str) -> bool:
    return value in MODULES
