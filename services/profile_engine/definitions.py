# services/profile_engine/definitions.py
# Static definitions for the speech profile questionnaires and exercise library.

# --- Screening ---
SCREENING_QUESTIONS = [
    {
        "id": "q0",
        "type": "yes-no",
        "category": "screening",
        "emoji": "🗣️",
        "text": "Do you stutter?",
    },
]

# --- Stuttering Risk & Pattern Predictor (generic set, also the "yes" branch) ---
STUTTERING_QUESTIONS = [
    # History / Risk
    {
        "id": "q1",
        "type": "yes-no",
        "category": "history",
        "emoji": "👨‍👩‍👧",
        "text": "Does anyone in your family stutter?",
    },
    {
        "id": "q2",
        "type": "multiple-choice",
        "category": "history",
        "emoji": "👶",
        "text": "When did you first notice stuttering?",
        "options": ["Before age 8", "After age 8", "Not sure"],
    },
    # Situational Triggers
    {
        "id": "q3",
        "type": "rank",
        "category": "situational",
        "emoji": "📊",
        "text": "Drag to rank: What's hardest for you?",
        "options": [
            "📞 Phone calls",
            "🎤 Public speaking",
            "👋 Introductions",
            "🍔 Ordering food",
            "👨‍👩‍👧‍👦 Family talks",
        ],
    },
    # Physical Signs
    {
        "id": "q4",
        "type": "slider",
        "category": "physical",
        "emoji": "😰",
        "text": "How tense do you feel before speaking?",
        "slider_min": 0,
        "slider_max": 10,
        "slider_labels": {"min": "😌 Relaxed", "max": "😣 Very tense"},
    },
    {
        "id": "q5",
        "type": "yes-no",
        "category": "physical",
        "emoji": "👀",
        "text": "Do you blink, jerk, or move your jaw when speaking?",
    },
    # Emotional
    {
        "id": "q6",
        "type": "slider",
        "category": "emotional",
        "emoji": "😟",
        "text": "How worried are you about being judged?",
        "slider_min": 0,
        "slider_max": 10,
        "slider_labels": {"min": "😊 Not at all", "max": "😰 Very worried"},
    },
    {
        "id": "q7",
        "type": "yes-no",
        "category": "emotional",
        "emoji": "🚫",
        "text": "Do you avoid words or situations because of stuttering?",
    },
    {
        "id": "q8",
        "type": "slider",
        "category": "emotional",
        "emoji": "💭",
        "text": "How anxious are you before important talks?",
        "slider_min": 0,
        "slider_max": 10,
        "slider_labels": {"min": "😎 Calm", "max": "😬 Very anxious"},
    },
    # Functional Impact
    {
        "id": "q9",
        "type": "yes-no",
        "category": "functional",
        "emoji": "💼",
        "text": "Has stuttering affected your work or studies?",
    },
    {
        "id": "q10",
        "type": "slider",
        "category": "functional",
        "emoji": "💪",
        "text": "How confident are you speaking in public?",
        "slider_min": 0,
        "slider_max": 10,
        "slider_labels": {"min": "🙈 Not confident", "max": "🦁 Very confident"},
    },
    # Strength Check
    {
        "id": "q11",
        "type": "yes-no",
        "category": "strength",
        "emoji": "🎵",
        "text": "Do you speak smoothly when alone or singing?",
    },
    {
        "id": "q12",
        "type": "multiple-choice",
        "category": "strength",
        "emoji": "🎂",
        "text": "What's your age group?",
        "options": ["Under 18", "18-30", "31-45", "46-60", "Over 60"],
    },
]

# --- Speaking confidence set (the "no" branch) ---
SPEAKING_CONFIDENCE_QUESTIONS = [
    {
        "id": "a1",
        "type": "yes-no",
        "category": "history",
        "emoji": "🗨️",
        "text": "Have people told you that you speak too fast or trip over words?",
    },
    {
        "id": "a2",
        "type": "multiple-choice",
        "category": "history",
        "emoji": "🧠",
        "text": "How often does your mind go blank mid-sentence?",
        "options": ["Often", "Sometimes", "Rarely"],
    },
    {
        "id": "a3",
        "type": "rank",
        "category": "situational",
        "emoji": "📊",
        "text": "Drag to rank: Where do nerves hit you hardest?",
        "options": [
            "🎤 Presentations",
            "💼 Job interviews",
            "👥 Group discussions",
            "📞 Phone calls",
            "🙋 Asking questions",
        ],
    },
    {
        "id": "a4",
        "type": "slider",
        "category": "physical",
        "emoji": "😰",
        "text": "How tight does your voice feel when you are nervous?",
        "slider_min": 0,
        "slider_max": 10,
        "slider_labels": {"min": "😌 Loose", "max": "😣 Very tight"},
    },
    {
        "id": "a5",
        "type": "yes-no",
        "category": "physical",
        "emoji": "🫨",
        "text": "Does your voice shake or your breath run short under pressure?",
    },
    {
        "id": "a6",
        "type": "slider",
        "category": "emotional",
        "emoji": "😟",
        "text": "How worried are you about being judged when you speak?",
        "slider_min": 0,
        "slider_max": 10,
        "slider_labels": {"min": "😊 Not at all", "max": "😰 Very worried"},
    },
    {
        "id": "a7",
        "type": "yes-no",
        "category": "emotional",
        "emoji": "🚫",
        "text": "Do you skip chances to speak up because of nerves?",
    },
    {
        "id": "a8",
        "type": "slider",
        "category": "emotional",
        "emoji": "💭",
        "text": "How anxious are you before important talks?",
        "slider_min": 0,
        "slider_max": 10,
        "slider_labels": {"min": "😎 Calm", "max": "😬 Very anxious"},
    },
    {
        "id": "a9",
        "type": "yes-no",
        "category": "functional",
        "emoji": "💼",
        "text": "Has speaking anxiety held you back at work or school?",
    },
    {
        "id": "a10",
        "type": "slider",
        "category": "functional",
        "emoji": "💪",
        "text": "How confident are you speaking in public?",
        "slider_min": 0,
        "slider_max": 10,
        "slider_labels": {"min": "🙈 Not confident", "max": "🦁 Very confident"},
    },
    {
        "id": "a11",
        "type": "yes-no",
        "category": "strength",
        "emoji": "🎵",
        "text": "Do you speak easily with close friends and family?",
    },
    {
        "id": "a12",
        "type": "multiple-choice",
        "category": "strength",
        "emoji": "🎂",
        "text": "What's your age group?",
        "options": ["Under 18", "18-30", "31-45", "46-60", "Over 60"],
    },
]

TEST_INFO = {
    "title": "Stuttering Risk & Pattern Predictor (SRPP™)",
    "subtitle": "Speech Anxiety & Situational Trigger Scale (SASTS)",
    "description": "A science-backed assessment that maps your triggers, risk level, and daily exercises.",
    "trust_line": "Developed from clinical practice & validated screening items used in speech-language pathology.",
    "duration": "2-3 minutes",
    "questions": len(STUTTERING_QUESTIONS),
}

# --- Exercise library ---
BREATHING_EXERCISES = [
    {
        "id": "diaphragmatic",
        "name": "Diaphragmatic Breathing",
        "description": "Deep belly breathing to reduce tension and calm your nervous system.",
        "duration": "3-5 minutes",
        "steps": [
            "Sit comfortably with one hand on your chest and one on your belly",
            "Breathe in slowly through your nose for 4 seconds",
            "Feel your belly rise (not your chest)",
            "Hold for 2 seconds",
            "Exhale slowly through your mouth for 6 seconds",
            "Repeat 5-10 times",
        ],
        "benefit": "Reduces physical tension before speaking",
    },
    {
        "id": "box-breathing",
        "name": "Box Breathing (4-4-4-4)",
        "description": "A calming technique used by Navy SEALs to manage stress.",
        "duration": "4 minutes",
        "steps": [
            "Breathe in for 4 seconds",
            "Hold your breath for 4 seconds",
            "Breathe out for 4 seconds",
            "Hold empty for 4 seconds",
            "Repeat 4 cycles",
        ],
        "benefit": "Calms anxiety before important conversations",
    },
    {
        "id": "easy-onset",
        "name": "Easy Onset Breathing",
        "description": "Start words with gentle airflow to reduce blocks.",
        "duration": "5 minutes",
        "steps": [
            "Take a gentle breath",
            'Start with a soft "h" sound (like a sigh)',
            "Let the first word flow out gently",
            'Practice: "Hhhhello, Hhhhow are you?"',
            'Gradually reduce the "h" sound',
        ],
        "benefit": "Helps start words smoothly",
    },
    {
        "id": "prolonged-speech",
        "name": "Prolonged Speech Practice",
        "description": "Stretch your sounds to increase fluency.",
        "duration": "5-10 minutes",
        "steps": [
            "Take a breath",
            "Speak very slowly, stretching each sound",
            'Example: "Heeellooo, myyy naaame iiiis..."',
            "Gradually increase to normal speed",
            "Practice daily with simple sentences",
        ],
        "benefit": "Increases overall fluency",
    },
    {
        "id": "pausing",
        "name": "Strategic Pausing",
        "description": "Use natural pauses to reset and gain control.",
        "duration": "3 minutes",
        "steps": [
            "Read a paragraph aloud",
            "Pause briefly after each phrase (1-2 seconds)",
            "Take a small breath during pauses",
            "Continue speaking calmly",
            "Practice in real conversations",
        ],
        "benefit": "Gives you control in conversations",
    },
    {
        "id": "voluntary-stuttering",
        "name": "Voluntary Stuttering",
        "description": "Intentionally stutter to reduce fear and gain control.",
        "duration": "5 minutes",
        "steps": [
            "Choose a safe practice environment",
            'Intentionally repeat a sound: "M-m-my name is..."',
            "Stay relaxed during the repetition",
            "Notice it becomes less scary with practice",
            "Use this to desensitize yourself",
        ],
        "benefit": "Reduces fear of stuttering",
    },
    {
        "id": "relaxation",
        "name": "Progressive Muscle Relaxation",
        "description": "Release tension in speech muscles.",
        "duration": "10 minutes",
        "steps": [
            "Tense your jaw muscles for 5 seconds, then release",
            "Tense your tongue by pressing it to the roof of your mouth, then release",
            "Tense your throat muscles gently, then release",
            "Tense your shoulder muscles, then release",
            "Feel the difference between tense and relaxed",
        ],
        "benefit": "Releases muscle tension before speaking",
    },
    {
        "id": "mindful-speaking",
        "name": "Mindful Speaking",
        "description": "Focus on the present moment while speaking.",
        "duration": "5 minutes",
        "steps": [
            "Close your eyes and take 3 deep breaths",
            "Notice any tension in your body",
            "Speak a sentence slowly while staying aware",
            "Don't judge yourself if you stutter",
            "Focus on the message, not the words",
        ],
        "benefit": "Reduces performance anxiety",
    },
]
