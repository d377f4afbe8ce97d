QUESTIONS = [
    {
        "text": "How do you feel about advanced mathematics?",
        "options": [
            {"text": "I love it.", "impact": {"Data Analyst": 10, "Software Developer": 5}},
            {"text": "It's okay if necessary.", "impact": {"Software Developer": 2}},
            {"text": "I hate it.", "impact": {"Data Analyst": -10, "UI/UX Designer": 5}}
        ]
    },
    {
        "text": "Which activity sounds most appealing for a Saturday afternoon?",
        "options": [
            {"text": "Solving a complex logic puzzle or riddle.", "impact": {"Software Developer": 10, "Cybersecurity Analyst": 5}, "badgeAwarded": "Puzzle Master"},
            {"text": "Sketching, painting, or redecorating your room.", "impact": {"UI/UX Designer": 10}, "badgeAwarded": "Creative Soul"},
            {"text": "Organizing your budget or categorizing a collection.", "impact": {"Data Analyst": 10}, "badgeAwarded": "Organizer"},
            {"text": "Learning how a lock works or watching crime docs.", "impact": {"Cybersecurity Analyst": 10, "Software Developer": 3}, "badgeAwarded": "Investigator"}
        ]
    },
    {
        "text": "In a group project, what role do you usually take?",
        "options": [
            {"text": "The one who makes the slides look amazing.", "impact": {"UI/UX Designer": 8, "Software Developer": 2}},
            {"text": "The builder who actually puts the project together.", "impact": {"Software Developer": 10, "Cybersecurity Analyst": 4}},
            {"text": "The researcher who checks facts and finds trends.", "impact": {"Data Analyst": 10, "Cybersecurity Analyst": 5}}
        ]
    },
    {
        "text": "How do you prefer to solve problems?",
        "options": [
            {"text": "Visualizing the end result first.", "impact": {"UI/UX Designer": 10}},
            {"text": "Breaking it down into small, logical steps.", "impact": {"Software Developer": 10, "Data Analyst": 5}},
            {"text": "Looking for vulnerabilities or weak points.", "impact": {"Cybersecurity Analyst": 10}},
            {"text": "Looking at historical data to predict the outcome.", "impact": {"Data Analyst": 10}}
        ]
    },
    {
        "text": "Pick a tool you'd rather learn:",
        "options": [
            {"text": "Photoshop / Figma", "impact": {"UI/UX Designer": 10}},
            {"text": "Visual Studio / VS Code", "impact": {"Software Developer": 10}},
            {"text": "Excel / PowerBI", "impact": {"Data Analyst": 10}},
            {"text": "Kali Linux / Wireshark", "impact": {"Cybersecurity Analyst": 10}}
        ]
    },
    {
        "text": "A website feature isn't working. What is your first instinct?",
        "options": [
            {"text": "Check the code for syntax errors.", "impact": {"Software Developer": 10}},
            {"text": "Check if the layout is broken on mobile.", "impact": {"UI/UX Designer": 10}},
            {"text": "Check if the database connection failed.", "impact": {"Data Analyst": 8, "Software Developer": 5}},
            {"text": "Check if it was a malicious attack.", "impact": {"Cybersecurity Analyst": 10}, "badgeAwarded": "Paranoid (Good)"}
        ]
    },
    {
        "text": "You get a huge box of LEGOs. What do you do?",
        "options": [
            {"text": "Sort them by color and size first.", "impact": {"Data Analyst": 10}, "badgeAwarded": "Sorter"},
            {"text": "Build a strong, fortified castle.", "impact": {"Cybersecurity Analyst": 8, "Software Developer": 5}},
            {"text": "Build something that looks beautiful on a shelf.", "impact": {"UI/UX Designer": 10}},
            {"text": "Build a working robot or machine.", "impact": {"Software Developer": 10}, "badgeAwarded": "Engineer"}
        ]
    },
    {
        "text": "What kind of feedback hurts you the most?",
        "options": [
            {"text": "'This looks ugly.'", "impact": {"UI/UX Designer": 10}},
            {"text": "'This doesn't work correctly.'", "impact": {"Software Developer": 10}},
            {"text": "'This data is inaccurate.'", "impact": {"Data Analyst": 10}},
            {"text": "'This isn't secure.'", "impact": {"Cybersecurity Analyst": 10}}
        ]
    },
    {
        "text": "Choose a superpower:",
        "options": [
            {"text": "Invisibility (To go unseen).", "impact": {"Cybersecurity Analyst": 10}},
            {"text": "Creation (To make things from nothing).", "impact": {"Software Developer": 8, "UI/UX Designer": 8}},
            {"text": "Omniscience (To know all facts).", "impact": {"Data Analyst": 10}, "badgeAwarded": "All-Knowing"},
            {"text": "Telepathy (To understand what people want).", "impact": {"UI/UX Designer": 10}}
        ]
    },
    {
        "text": "If you worked at a bank, where would you be?",
        "options": [
            {"text": "Designing the mobile app interface.", "impact": {"UI/UX Designer": 10}},
            {"text": "Building the transaction processing engine.", "impact": {"Software Developer": 10}},
            {"text": "Analyzing spending trends for reports.", "impact": {"Data Analyst": 10}},
            {"text": "Securing the vault and firewalls.", "impact": {"Cybersecurity Analyst": 10}, "badgeAwarded": "Guardian"}
        ]
    },
    {
        "text": "What is your preferred browser tab situation?",
        "options": [
            {"text": "50+ tabs, open to Stack Overflow.", "impact": {"Software Developer": 10}},
            {"text": "Neatly organized bookmark folders.", "impact": {"Data Analyst": 8, "UI/UX Designer": 5}},
            {"text": "Incognito / Private mode mostly.", "impact": {"Cybersecurity Analyst": 10}},
            {"text": "Tabs for Pinterest, Dribbble, Behance.", "impact": {"UI/UX Designer": 10}}
        ]
    },
    {
        "text": "You find a USB drive in the office parking lot. You:",
        "options": [
            {"text": "Plug it in to see what's on it.", "impact": {"Software Developer": 5, "UI/UX Designer": 5}},
            {"text": "Never plug it in! It's a trap.", "impact": {"Cybersecurity Analyst": 12}, "badgeAwarded": "Security Conscious"},
            {"text": "Plug it in on an isolated, air-gapped machine.", "impact": {"Cybersecurity Analyst": 8, "Data Analyst": 5}},
            {"text": "Leave it alone.", "impact": {"Data Analyst": 2, "UI/UX Designer": 2}}
        ]
    },
    {
        "text": "Which movie character role appeals to you?",
        "options": [
            {"text": "The Architect (The Matrix) - Designing the system.", "impact": {"Software Developer": 10}},
            {"text": "Iron Man - Building cool visual interfaces.", "impact": {"UI/UX Designer": 10}},
            {"text": "Sherlock Holmes - Deducing facts from data.", "impact": {"Data Analyst": 10}},
            {"text": "Mr. Robot - Hacking and exposing secrets.", "impact": {"Cybersecurity Analyst": 10}}
        ]
    },
    {
        "text": "What aspect of video games do you appreciate most?",
        "options": [
            {"text": "The graphics and art style.", "impact": {"UI/UX Designer": 10}},
            {"text": "The game mechanics and physics.", "impact": {"Software Developer": 10}},
            {"text": "The stats, DPS charts, and loot tables.", "impact": {"Data Analyst": 12}, "badgeAwarded": "Min-Maxer"},
            {"text": "Finding glitches or cheats.", "impact": {"Cybersecurity Analyst": 10}}
        ]
    },
    {
        "text": "You have to present a project. How do you prepare?",
        "options": [
            {"text": "Make beautiful, interactive slides.", "impact": {"UI/UX Designer": 10}},
            {"text": "Prepare charts, graphs, and statistics.", "impact": {"Data Analyst": 10}},
            {"text": "Do a live demo of the functionality.", "impact": {"Software Developer": 10}},
            {"text": "Explain the risk assessment and safety protocols.", "impact": {"Cybersecurity Analyst": 10}}
        ]
    },
    {
        "text": "Preferred work environment?",
        "options": [
            {"text": "A creative studio with mood boards (like in BGC).", "impact": {"UI/UX Designer": 10}},
            {"text": "Quiet room, headphones on, multiple monitors.", "impact": {"Software Developer": 8, "Data Analyst": 8}},
            {"text": "A command center watching live network traffic.", "impact": {"Cybersecurity Analyst": 10}},
            {"text": "Collaborative open space (hybrid setup is fine).", "impact": {"UI/UX Designer": 5, "Software Developer": 5}}
        ]
    },
    {
        "text": "Which phrase annoys you the most?",
        "options": [
            {"text": "\"Can you make the logo bigger?\"", "impact": {"UI/UX Designer": 12}},
            {"text": "\"It works on my machine.\"", "impact": {"Software Developer": 12}},
            {"text": "\"We don't need a password for that.\"", "impact": {"Cybersecurity Analyst": 12}},
            {"text": "\"Just guess the numbers for now.\"", "impact": {"Data Analyst": 12}}
        ]
    },
    {
        "text": "What would you automate first?",
        "options": [
            {"text": "My daily emails and file sorting.", "impact": {"Software Developer": 8, "Data Analyst": 5}},
            {"text": "Security scans of my home network.", "impact": {"Cybersecurity Analyst": 10}},
            {"text": "Creating consistent color palettes.", "impact": {"UI/UX Designer": 10}},
            {"text": "Collecting PSE (Philippine Stock Exchange) data.", "impact": {"Data Analyst": 10}}
        ]
    },
    {
        "text": "Pick a geometric shape.",
        "options": [
            {"text": "A perfect Circle (Harmony).", "impact": {"UI/UX Designer": 8}},
            {"text": "A Square (Structure/Logic).", "impact": {"Software Developer": 8}},
            {"text": "A Grid (Organization).", "impact": {"Data Analyst": 8}},
            {"text": "A Shield (Protection).", "impact": {"Cybersecurity Analyst": 8}}
        ]
    },
    {
        "text": "If you were a writer, what would you write?",
        "options": [
            {"text": "A technical instruction manual.", "impact": {"Software Developer": 10}},
            {"text": "A mystery novel.", "impact": {"Cybersecurity Analyst": 8, "Data Analyst": 5}},
            {"text": "A graphic novel / comic.", "impact": {"UI/UX Designer": 10}},
            {"text": "An encyclopedia.", "impact": {"Data Analyst": 10}}
        ]
    },
    {
        "text": "Final Question: What drives you?",
        "options": [
            {"text": "Making things that people enjoy using.", "impact": {"UI/UX Designer": 10, "Software Developer": 5}},
            {"text": "Finding the objective truth.", "impact": {"Data Analyst": 10}},
            {"text": "Protecting people from harm.", "impact": {"Cybersecurity Analyst": 10}},
            {"text": "Solving difficult technical challenges.", "impact": {"Software Developer": 10, "Cybersecurity Analyst": 5}}
        ]
    }
]
