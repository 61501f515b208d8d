"""
Identity Configuration - Archetypes, compound archetypes, traits and styles.

Archetypes are keyed by service id. Compound archetypes are keyed by the two
service ids sorted alphabetically and joined with "-".
"""

ARCHETYPES = {
    "debt": {
        "name": "The Fiscal Hawk",
        "description": "You prioritize financial stability and debt reduction above all.",
        "emoji": "🦅",
    },
    "health": {
        "name": "The Humanitarian",
        "description": "You prioritize the health and wellbeing of all citizens.",
        "emoji": "❤️",
    },
    "infrastructure": {
        "name": "The Builder",
        "description": "You believe in connecting and empowering through infrastructure.",
        "emoji": "🏗️",
    },
    "defense": {
        "name": "The Guardian",
        "description": "Security and protection are your primary concerns.",
        "emoji": "🛡️",
    },
    "education": {
        "name": "The Visionary",
        "description": "You invest in the future through knowledge and innovation.",
        "emoji": "🎓",
    },
    "environment": {
        "name": "The Naturalist",
        "description": "You champion the planet and sustainable living.",
        "emoji": "🌳",
    },
    "social": {
        "name": "The Caretaker",
        "description": "You ensure no citizen is left behind in society.",
        "emoji": "🤝",
    },
    "governance": {
        "name": "The Diplomat",
        "description": "You value efficient governance and global cooperation.",
        "emoji": "🏛️",
    },
}

# Returned when the leading service has no archetype of its own
DEFAULT_ARCHETYPE = {
    "name": "The Balanced",
    "description": "You seek equilibrium across all sectors.",
    "emoji": "⚖️",
}

COMPOUND_ARCHETYPES = {
    "education-health": {
        "name": "The Progressive",
        "description": "Healthy minds and healthy bodies: you build human potential.",
        "emoji": "🌱",
    },
    "health-social": {
        "name": "The Welfare Champion",
        "description": "You believe a strong safety net is the foundation of society.",
        "emoji": "🫶",
    },
    "education-infrastructure": {
        "name": "The Modernizer",
        "description": "You wire the nation for the next century of growth.",
        "emoji": "🚀",
    },
    "environment-infrastructure": {
        "name": "The Green Builder",
        "description": "You build the clean, connected cities of tomorrow.",
        "emoji": "🏙️",
    },
    "defense-governance": {
        "name": "The Statesman",
        "description": "Order at home and influence abroad guide your priorities.",
        "emoji": "🎖️",
    },
    "debt-defense": {
        "name": "The Conservative",
        "description": "A secure nation with sound finances is your ideal.",
        "emoji": "🏦",
    },
    "education-environment": {
        "name": "The Futurist",
        "description": "You invest in ideas and in the planet future generations inherit.",
        "emoji": "🔭",
    },
    "environment-health": {
        "name": "The Guardian of Life",
        "description": "Clean air, clean water and care for all.",
        "emoji": "🌍",
    },
    "governance-social": {
        "name": "The Reformer",
        "description": "You want institutions that work for every citizen.",
        "emoji": "⚙️",
    },
    "debt-governance": {
        "name": "The Technocrat",
        "description": "Efficient administration and fiscal prudence above ideology.",
        "emoji": "📊",
    },
}

# Each trait activates when a sub-service's share of its parent reaches the threshold
POLICY_TRAITS = [
    {
        "id": "debt-slayer",
        "service_id": "debt",
        "sub_service_id": "bonds",
        "threshold": 0.45,
        "name": "Debt Slayer",
        "description": "Aggressively retiring national bonds.",
        "emoji": "⚔️",
    },
    {
        "id": "hospital-first",
        "service_id": "health",
        "sub_service_id": "hospitals",
        "threshold": 0.55,
        "name": "Hospital First",
        "description": "Acute care comes before everything else.",
        "emoji": "🏥",
    },
    {
        "id": "mind-matters",
        "service_id": "health",
        "sub_service_id": "mental-health",
        "threshold": 0.35,
        "name": "Mind Matters",
        "description": "Mental health is health.",
        "emoji": "🧠",
    },
    {
        "id": "pandemic-ready",
        "service_id": "health",
        "sub_service_id": "pandemic",
        "threshold": 0.30,
        "name": "Pandemic Ready",
        "description": "Prepared for the next outbreak.",
        "emoji": "🦠",
    },
    {
        "id": "rail-enthusiast",
        "service_id": "infrastructure",
        "sub_service_id": "rail",
        "threshold": 0.40,
        "name": "Rail Enthusiast",
        "description": "Trains over traffic jams.",
        "emoji": "🚄",
    },
    {
        "id": "digital-native",
        "service_id": "infrastructure",
        "sub_service_id": "internet",
        "threshold": 0.30,
        "name": "Digital Native",
        "description": "Connectivity is a public utility.",
        "emoji": "📡",
    },
    {
        "id": "hawk",
        "service_id": "defense",
        "sub_service_id": "military",
        "threshold": 0.50,
        "name": "Hawk",
        "description": "A strong military keeps the peace.",
        "emoji": "🪖",
    },
    {
        "id": "law-and-order",
        "service_id": "defense",
        "sub_service_id": "police",
        "threshold": 0.40,
        "name": "Law & Order",
        "description": "Safe streets come first.",
        "emoji": "🚓",
    },
    {
        "id": "cyber-shield",
        "service_id": "defense",
        "sub_service_id": "cyber",
        "threshold": 0.30,
        "name": "Cyber Shield",
        "description": "The next war is fought online.",
        "emoji": "🛰️",
    },
    {
        "id": "space-cadet",
        "service_id": "education",
        "sub_service_id": "space",
        "threshold": 0.25,
        "name": "Space Cadet",
        "description": "Reaching for the stars.",
        "emoji": "🚀",
    },
    {
        "id": "patron-of-the-arts",
        "service_id": "education",
        "sub_service_id": "arts",
        "threshold": 0.15,
        "name": "Patron of the Arts",
        "description": "Culture is what makes a nation worth living in.",
        "emoji": "🎨",
    },
    {
        "id": "research-driven",
        "service_id": "education",
        "sub_service_id": "research",
        "threshold": 0.35,
        "name": "Research Driven",
        "description": "Science pays for itself.",
        "emoji": "🔬",
    },
    {
        "id": "green-energy",
        "service_id": "environment",
        "sub_service_id": "energy",
        "threshold": 0.50,
        "name": "Clean Energy Champion",
        "description": "Powering the grid with renewables.",
        "emoji": "☀️",
    },
    {
        "id": "farmers-friend",
        "service_id": "environment",
        "sub_service_id": "agriculture",
        "threshold": 0.35,
        "name": "Farmer's Friend",
        "description": "Food security starts on the farm.",
        "emoji": "🌾",
    },
    {
        "id": "housing-advocate",
        "service_id": "social",
        "sub_service_id": "housing",
        "threshold": 0.35,
        "name": "Housing Advocate",
        "description": "A roof over every head.",
        "emoji": "🏘️",
    },
    {
        "id": "family-values",
        "service_id": "social",
        "sub_service_id": "childcare",
        "threshold": 0.30,
        "name": "Family Values",
        "description": "Investing in the next generation.",
        "emoji": "👶",
    },
    {
        "id": "global-citizen",
        "service_id": "governance",
        "sub_service_id": "foreign-aid",
        "threshold": 0.35,
        "name": "Global Citizen",
        "description": "Generous abroad, respected everywhere.",
        "emoji": "🌐",
    },
    {
        "id": "justice-seeker",
        "service_id": "governance",
        "sub_service_id": "justice",
        "threshold": 0.40,
        "name": "Justice Seeker",
        "description": "Fair courts for everyone.",
        "emoji": "⚖️",
    },
]

# Governance style labels, checked in this order
STYLES = {
    "focused": {"name": "Focused", "emoji": "🎯"},
    "ambitious": {"name": "Ambitious", "emoji": "🌟"},
    "internationalist": {"name": "Internationalist", "emoji": "🌍"},
}
