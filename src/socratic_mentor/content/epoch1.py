"""Epoch 1: The Bare Essentials."""

from __future__ import annotations

from ..builders import ChallengeBuilder, LessonBuilder
from ..models import Challenge, ChallengeType, Lesson, QuizQuestion, TestCase


def lesson_01() -> Lesson:
    """Lesson 1.1: Data Types in Depth"""
    return (
        LessonBuilder("epoch-1-lesson-1", "Lesson 1.1: Data Types in Depth")
        .add_theory(
            "Why Types Exist",
            "Java needs to know how much memory a value takes and which operations make sense on it. "
            "int holds whole numbers, double holds decimals, boolean holds true or false and String holds text.",
        )
        .add_example("Four Types", 'int age = 28;\ndouble price = 15.99;\nString name = "Bob";\nboolean active = true;')
        .add_warning("Integer Division", "10 / 3 is 3 when both sides are int. The fraction is discarded.")
        .add_challenge(
            ChallengeBuilder("epoch-1-lesson-1-quiz1", "Choosing Data Types", ChallengeType.MULTIPLE_CHOICE)
            .description("Which type should store a person's name?")
            .add_multiple_choice_option("A) int")
            .add_multiple_choice_option("B) double")
            .add_multiple_choice_option("C) String")
            .add_multiple_choice_option("D) boolean")
            .correct_answer("C")
            .build()
        )
        .add_challenge(_type_rules_quiz())
        .add_challenge(_variables_challenge())
        .estimated_minutes(30)
        .build()
    )


def _type_rules_quiz() -> Challenge:
    return (
        ChallengeBuilder("epoch-1-lesson-1-quiz2", "Understanding Type Rules", ChallengeType.MULTIPLE_CHOICE)
        .description("int x = 10;\nint y = 3;\ndouble result = x / y;\n\nWhat is result?")
        .add_multiple_choice_option("A) 3.333...")
        .add_multiple_choice_option("B) 3.0")
        .add_multiple_choice_option("C) Compilation error")
        .add_multiple_choice_option("D) 3")
        .correct_answer("B")
        .build()
    )


def _variables_challenge() -> Challenge:
    return (
        ChallengeBuilder("epoch-1-lesson-1-variables", "Creating Multiple Data Types", ChallengeType.FREE_CODING)
        .description("Declare int age = 28, double price = 15.99, String name = \"Bob\" and print name.")
        .starter_code("public class DataTypes {\n    public static void main(String[] args) {\n    }\n}")
        .method_signature("main")
        .add_test_case(TestCase(description="Should print 'Bob'", inputs=(), expected_output="Bob"))
        .build()
    )


def lesson_02() -> Lesson:
    """Lesson 1.2: Operators and Expressions"""
    return (
        LessonBuilder("epoch-1-lesson-2", "Lesson 1.2: Operators and Expressions")
        .add_theory(
            "Arithmetic",
            "+, -, * and / work as expected. % gives the remainder of a division: 7 % 3 is 1.",
        )
        .add_key_point("Precedence", "* and / bind tighter than + and -. Use parentheses when in doubt.")
        .add_challenge(
            ChallengeBuilder("epoch-1-lesson-2-quiz", "Evaluate the Expression", ChallengeType.MULTIPLE_CHOICE)
            .description("What is 2 + 3 * 4?")
            .add_multiple_choice_option("A) 20")
            .add_multiple_choice_option("B) 14")
            .add_multiple_choice_option("C) 24")
            .correct_answer("B")
            .build()
        )
        .add_quiz_question(
            QuizQuestion("What is 17 % 5?", correct_choice_key="A", id="modulo")
            .add_choice("A", "2")
            .add_choice("B", "3")
            .add_choice("C", "3.4")
            .set_explanation("17 is 3 * 5 + 2, so the remainder is 2.")
        )
        .estimated_minutes(25)
        .build()
    )


def lesson_03() -> Lesson:
    """Lesson 1.3: While Loops - Mastering Repetition"""
    return (
        LessonBuilder("epoch-1-lesson-3", "Lesson 1.3: While Loops - Mastering Repetition")
        .add_analogy("Stirring Until Smooth", "Keep stirring while there are lumps. Check first, then act, then check again.")
        .add_example("Counting Down", "int n = 3;\nwhile (n > 0) {\n    System.out.println(n);\n    n--;\n}")
        .add_warning("Infinite Loops", "If nothing inside the loop moves the condition towards false, it never ends.")
        .add_challenge(
            ChallengeBuilder("epoch-1-lesson-3-complete", "Sum to N", ChallengeType.CODE_COMPLETION)
            .description("Complete sumTo so it returns 1 + 2 + ... + n using a while loop.")
            .starter_code(
                "public static int sumTo(int n) {\n"
                "    int total = 0;\n"
                "    int i = 1;\n"
                "    // your loop here\n"
                "    return total;\n"
                "}"
            )
            .method_signature("public static int sumTo(int n)")
            .add_test_case("sumTo(1) is 1", (1,), 1)
            .add_test_case("sumTo(4) is 10", (4,), 10)
            .add_test_case(TestCase(description="sumTo(0) is 0", inputs=(0,), expected_output=0, visible=False))
            .build()
        )
        .add_quiz_question(
            QuizQuestion("How many times does `while (false) {}` run its body?", correct_choice_key="A", id="zero")
            .add_choice("A", "Zero times")
            .add_choice("B", "Once")
            .add_choice("C", "Forever")
            .set_explanation("The condition is checked before the first pass, so the body never runs.")
        )
        .estimated_minutes(30)
        .build()
    )
