CAREERS = [
    {
        "name": "Software Developer",
        "salary_range": "₱30k - ₱150k per month",
        "description": "You build the systems that run the world. You love logic, problem-solving, and seeing code come to life. High demand in BGC, Makati, and offshore roles."
    },
    {
        "name": "UI/UX Designer",
        "salary_range": "₱25k - ₱100k per month",
        "description": "You bridge the gap between human and machine. You care about aesthetics, user empathy, and intuitive flows. Growing demand in startups and tech companies."
    },
    {
        "name": "Data Analyst",
        "salary_range": "₱25k - ₱90k per month",
        "description": "You turn noise into knowledge. You love patterns, statistics, and finding the truth hidden in spreadsheets. Essential in BPO, finance, and e-commerce sectors."
    },
    {
        "name": "Cybersecurity Analyst",
        "salary_range": "₱35k - ₱120k per month",
        "description": "The digital guardian. You enjoy breaking things to fix them, analyzing threats, and protecting systems. Critical role in banking, government, and enterprise IT."
    }
]
