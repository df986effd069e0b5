"""One-time DB setup: create tables and seed a sample discrete-math quiz."""
from discrete_quiz.db.session import create_tables, get_session_factory
from discrete_quiz.db.models import (
    DifficultyEnum,
    Question,
    QuestionOption,
    QuestionTypeEnum,
    Quiz,
    QuizDifficultyEnum,
    QuizQuestion,
    Topic,
    TopicCategoryEnum,
)

SAMPLE_TITLE = "Discrete Math Warm-up"

# (topic name, category, tier) → questions as (type, tier, text, points, [(option, correct)])
SAMPLE_BANK = [
    (
        ("Propositional Logic", TopicCategoryEnum.LOGIC, DifficultyEnum.BASIC),
        [
            (QuestionTypeEnum.MULTIPLE_CHOICE, DifficultyEnum.BASIC,
             "Which formula is logically equivalent to p → q?", 5,
             [("¬p ∨ q", True), ("p ∨ ¬q", False), ("¬p ∧ q", False), ("q → p", False)]),
            (QuestionTypeEnum.TRUE_FALSE, DifficultyEnum.BASIC,
             "(p ∧ ¬p) is a contradiction.", 2,
             [("True", True), ("False", False)]),
        ],
    ),
    (
        ("Paths and Circuits", TopicCategoryEnum.GRAPH_THEORY, DifficultyEnum.INTERMEDIATE),
        [
            (QuestionTypeEnum.MULTIPLE_CHOICE, DifficultyEnum.INTERMEDIATE,
             "A connected graph has an Euler circuit exactly when every vertex has…", 10,
             [("even degree", True), ("odd degree", False),
              ("degree at least 2", False), ("the same degree", False)]),
        ],
    ),
    (
        ("Counting Principles", TopicCategoryEnum.COMBINATORICS, DifficultyEnum.BASIC),
        [
            (QuestionTypeEnum.MULTIPLE_CHOICE, DifficultyEnum.ADVANCED,
             "How many bit strings of length 8 contain exactly three 1s?", 8,
             [("56", True), ("28", False), ("70", False), ("8", False)]),
        ],
    ),
]

session_factory = get_session_factory()

# 1. Create all tables
create_tables()
print("✅ All tables created")

with session_factory() as db:
    # 2. Sample quiz (idempotent on title)
    if db.query(Quiz).filter(Quiz.title == SAMPLE_TITLE).first():
        print("  Sample quiz already exists")
    else:
        questions: list[Question] = []
        topics: list[Topic] = []
        for (name, category, tier), items in SAMPLE_BANK:
            topic = db.query(Topic).filter(Topic.name == name).first()
            if topic is None:
                topic = Topic(name=name, category=category, difficulty=tier)
                db.add(topic)
                print(f"✅ Created topic: {category.value} / {name}")
            topics.append(topic)
            for qtype, qtier, text, points, options in items:
                questions.append(
                    Question(
                        topic=topic,
                        question_type=qtype,
                        difficulty=qtier,
                        text=text,
                        points=points,
                        options=[
                            QuestionOption(text=t, is_correct=ok, position=i)
                            for i, (t, ok) in enumerate(options)
                        ],
                    )
                )

        quiz = Quiz(
            title=SAMPLE_TITLE,
            difficulty=QuizDifficultyEnum.MIXED,
            duration_minutes=15,
            total_points=sum(q.points for q in questions),
            topics=topics,
            quiz_questions=[
                QuizQuestion(question=q, position=i) for i, q in enumerate(questions)
            ],
        )
        db.add(quiz)
        db.commit()
        print(f"✅ Created quiz '{quiz.title}' (id={quiz.id}, {quiz.total_points:g} points)")

print("\n🎉 Database is ready to use!")
