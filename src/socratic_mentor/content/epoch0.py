"""Epoch 0: The Foundation."""

from __future__ import annotations

from ..builders import ChallengeBuilder, LessonBuilder
from ..models import Challenge, ChallengeType, Lesson, QuizQuestion


def lesson_01() -> Lesson:
    """Lesson 0.1: What is a Computer Program?"""
    return (
        LessonBuilder("epoch-0-lesson-1", "Lesson 0.1: What is a Computer Program?")
        .add_theory(
            "The Problem",
            "Ask someone to make a sandwich and leave the room. If they follow your words literally, "
            "the jar stays closed and the jelly ends up on the crust. You relied on knowledge you never "
            "stated.\n\nA computer is that helper, taken to the extreme: it does exactly what it is told "
            "and nothing else.",
        )
        .add_analogy(
            "Programming is Recipe Writing",
            "A recipe for a person says 'mix the ingredients'. A recipe for a computer has to name the "
            "bowl, the spoon, the motion and how long to keep going. Every object is identified and every "
            "step is explicit.",
        )
        .add_theory(
            "What a Program Is",
            "A program is a sequence of instructions, written in a language the computer understands, "
            "that manipulates data to produce a result.",
        )
        .add_key_point("Remember", "Computers have no common sense. Precision is the whole job.")
        .add_challenge(_program_definition_quiz())
        .add_quiz_question(
            QuizQuestion(
                "Why did the sandwich go wrong?",
                correct_choice_key="B",
                id="sandwich",
            )
            .add_choice("A", "The helper was careless")
            .add_choice("B", "The instructions left steps implicit")
            .add_choice("C", "Sandwiches are too complex to describe")
            .set_explanation("The helper did exactly what was said. The missing detail was in the instructions.")
        )
        .estimated_minutes(15)
        .build()
    )


def _program_definition_quiz() -> Challenge:
    return (
        ChallengeBuilder("epoch-0-lesson-1-quiz", "Understanding Computer Programs", ChallengeType.MULTIPLE_CHOICE)
        .description("Which statement best describes a computer program?")
        .add_multiple_choice_option("A) A list of suggestions for the computer to try out")
        .add_multiple_choice_option("B) A step-by-step sequence of instructions the computer follows exactly")
        .add_multiple_choice_option("C) A goal the computer works out how to reach on its own")
        .add_multiple_choice_option("D) A conversation in which you explain what you want")
        .correct_answer("B")
        .build()
    )


def lesson_02() -> Lesson:
    """Lesson 0.2: Your First Java Program"""
    return (
        LessonBuilder("epoch-0-lesson-2", "Lesson 0.2: Your First Java Program")
        .add_theory(
            "From Text to Running Code",
            "Java source lives in .java files. The compiler turns it into bytecode and the Java Virtual "
            "Machine runs that bytecode on any operating system.",
        )
        .add_example(
            "Hello, World",
            "public class Hello {\n"
            "    public static void main(String[] args) {\n"
            '        System.out.println("Hello, World!");\n'
            "    }\n"
            "}",
        )
        .add_warning(
            "File Names Matter",
            "A public class named Hello must be saved in Hello.java, with the same capitalisation.",
        )
        .add_challenge(_entry_point_quiz())
        .add_challenge(_print_name_challenge())
        .estimated_minutes(20)
        .build()
    )


def _entry_point_quiz() -> Challenge:
    return (
        ChallengeBuilder("epoch-0-lesson-2-quiz", "Where Programs Start", ChallengeType.MULTIPLE_CHOICE)
        .description("Which method does the JVM call first when it runs a class?")
        .add_multiple_choice_option("A) start")
        .add_multiple_choice_option("B) run")
        .add_multiple_choice_option("C) main")
        .add_multiple_choice_option("D) init")
        .correct_answer("C")
        .build()
    )


def _print_name_challenge() -> Challenge:
    return (
        ChallengeBuilder("epoch-0-lesson-2-print", "Print Your Name", ChallengeType.FREE_CODING)
        .description("Change the program so it prints the name Ada.")
        .starter_code(
            "public class Greeting {\n"
            "    public static void main(String[] args) {\n"
            "        // print Ada here\n"
            "    }\n"
            "}"
        )
        .method_signature("main")
        .add_test_case("Should print 'Ada'", (), "Ada")
        .build()
    )


def lesson_03() -> Lesson:
    """Lesson 0.3: Understanding Variables"""
    return (
        LessonBuilder("epoch-0-lesson-3", "Lesson 0.3: Understanding Variables")
        .add_analogy(
            "Labelled Boxes",
            "A variable is a box with a label on it. The label is the name, the box holds a value, and "
            "in Java the box only fits one type of thing.",
        )
        .add_example("Declaring and Assigning", "int age = 28;\nage = age + 1;")
        .add_key_point("Assignment Is Not Equality", "= stores a value. It does not state that two things are equal.")
        .add_challenge(_assignment_quiz())
        .add_quiz_question(
            QuizQuestion("After `int x = 5; x = x + 2;` what is x?", correct_choice_key="C", id="reassign")
            .add_choice("A", "5")
            .add_choice("B", "2")
            .add_choice("C", "7")
            .set_explanation("The right side is evaluated first (5 + 2) and the result is stored back into x.")
        )
        .estimated_minutes(20)
        .build()
    )


def _assignment_quiz() -> Challenge:
    return (
        ChallengeBuilder("epoch-0-lesson-3-quiz", "Reading Assignments", ChallengeType.MULTIPLE_CHOICE)
        .description("What does `score = 10;` do?")
        .add_multiple_choice_option("A) Checks whether score equals 10")
        .add_multiple_choice_option("B) Stores 10 in the variable score")
        .add_multiple_choice_option("C) Creates a constant named 10")
        .correct_answer("B")
        .build()
    )


def lesson_04() -> Lesson:
    """Lesson 0.4: Making Decisions with If/Else"""
    return (
        LessonBuilder("epoch-0-lesson-4", "Lesson 0.4: Making Decisions with If/Else")
        .add_theory(
            "Branching",
            "An if statement runs a block only when its condition is true. An else block runs otherwise.",
        )
        .add_example(
            "Checking Age",
            'if (age >= 18) {\n    System.out.println("Adult");\n} else {\n    System.out.println("Minor");\n}',
        )
        .add_warning("= versus ==", "Use == to compare numbers. A single = assigns and will not compile here.")
        .add_challenge(_condition_quiz())
        .add_challenge(
            ChallengeBuilder("epoch-0-lesson-4-reflect", "Explain a Branch", ChallengeType.CONCEPTUAL)
            .description("In your own words, describe a decision you make every morning as an if/else.")
            .build()
        )
        .estimated_minutes(25)
        .build()
    )


def _condition_quiz() -> Challenge:
    return (
        ChallengeBuilder("epoch-0-lesson-4-quiz", "Predict the Branch", ChallengeType.MULTIPLE_CHOICE)
        .description("With `int t = 30;`, what does `if (t > 25) print(\"hot\") else print(\"mild\")` print?")
        .add_multiple_choice_option("A) hot")
        .add_multiple_choice_option("B) mild")
        .add_multiple_choice_option("C) Nothing")
        .correct_answer("A")
        .build()
    )
