"""Tests for the narrative analysis pipeline"""

from datetime import datetime, timedelta, timezone
from itertools import count

import pytest

from storyscope import analyze_story, InvalidInputError
from storyscope.analyzers.story import StructureClassifier, PlotPointDetector, GapDetector, CharacterExtractor
from storyscope.analyzers.story.structure import (
    calculate_adherence,
    calculate_completeness,
    structure_recommendations,
)
from storyscope.analyzers.story.characters import importance_for
from storyscope.analyzers.story.pacing import label_pacing, sentence_tension, act_pacing, pacing_issues
from storyscope.analyzers.story.suggestions import sort_by_priority
from storyscope.analyzers.story.genre import GenreClassifier
from storyscope.models import (
    Priority,
    StructureType,
    PacingType,
    PacingIssueType,
    RecommendationType,
    RelationshipType,
    Act,
    GapType,
    CharacterRole,
    SuggestionType,
    StructuralSuggestion,
)


JANE_AND_JOHN = (
    "Jane Doe woke early. "
    "Jane Doe met John Smith at the market. "
    "Jane Doe wanted answers. "
    "Jane Doe argued with John Smith. "
    "Jane Doe left town. "
    "Jane Doe never looked back."
)


def all_scores(analysis):
    """Every bounded score in an analysis"""
    scores = [analysis.structure.completeness, analysis.structure.adherence]
    scores += [act.strength for act in analysis.structure.acts]
    scores += [point.strength for point in analysis.plot_points]
    scores += [point.tension for point in analysis.pacing.tension_curve]
    for character in analysis.characters:
        scores += [character.screen_time, character.development.change_strength]
    scores += [logline.strength for logline in analysis.loglines]
    scores.append(analysis.genre.adherence)
    return scores


class TestStoryPipeline:
    """End-to-end behaviour of analyze_story"""

    def test_empty_content(self, fixed_clock):
        """Empty text degrades to defaults without raising"""
        analysis = analyze_story("Test", "", clock=fixed_clock)

        assert analysis.characters == []
        assert analysis.plot_points
        assert all(not point.present for point in analysis.plot_points)
        assert 0.0 <= analysis.structure.completeness <= 1.0
        assert analysis.pacing.overall_pacing == PacingType.TOO_SLOW
        assert analysis.pacing.tension_curve == []
        assert analysis.genre.primary.name == "drama"
        assert "a protagonist" in analysis.synopsis.short

    def test_hero_journey_keywords(self, fixed_clock):
        text = (
            "The hero leaves home on a journey. "
            "A mentor offers guidance. "
            "The quest leads past the threshold."
        )
        analysis = analyze_story("Quest", text, clock=fixed_clock)

        assert analysis.structure.type == StructureType.HERO_JOURNEY
        assert len(analysis.plot_points) == 11
        assert [act.name for act in analysis.structure.acts] == ["Ordinary World", "Special World", "Return"]

    def test_character_importance(self, fixed_clock):
        analysis = analyze_story("Jane", JANE_AND_JOHN, clock=fixed_clock)

        assert [c.name for c in analysis.characters] == ["Jane Doe", "John Smith"]
        assert analysis.characters[0].importance == 1.0
        assert analysis.characters[0].role == CharacterRole.PROTAGONIST
        assert analysis.characters[1].importance == 0.4
        assert analysis.characters[0].screen_time == pytest.approx(0.75)

    def test_deterministic(self, fixed_clock, sample_story):
        """Two runs with the same clock are byte-identical"""
        first = analyze_story("Sample", sample_story, clock=fixed_clock)
        second = analyze_story("Sample", sample_story, clock=fixed_clock)

        assert first.model_dump_json() == second.model_dump_json()

    def test_parallel_matches_sequential(self, fixed_clock, sample_story):
        sequential = analyze_story("Sample", sample_story, clock=fixed_clock)
        parallel = analyze_story("Sample", sample_story, clock=fixed_clock, parallel=True)

        assert sequential.model_dump_json() == parallel.model_dump_json()

    def test_sequential_ids(self, fixed_clock, sample_story):
        analysis = analyze_story("Sample", sample_story, clock=fixed_clock)

        assert analysis.id == "story-1"
        assert [act.id for act in analysis.structure.acts] == ["act-1", "act-2", "act-3"]
        assert analysis.plot_points[0].id == "plot-point-1"
        assert analysis.upload_date == fixed_clock()

    @pytest.mark.parametrize("content", ["", "One sentence only.", JANE_AND_JOHN])
    def test_act_ordering(self, content, sample_story):
        for text in (content, sample_story):
            acts = analyze_story("Order", text).structure.acts
            for act in acts:
                assert act.start_position <= act.end_position
            for current, following in zip(acts, acts[1:]):
                assert current.end_position <= following.start_position

    @pytest.mark.parametrize("content", ["", "Short.", JANE_AND_JOHN])
    def test_score_bounds(self, content, sample_story):
        for text in (content, sample_story):
            for score in all_scores(analyze_story("Bounds", text)):
                assert 0.0 <= score <= 1.0

    def test_presence_threshold(self, sample_story):
        for point in analyze_story("Sample", sample_story).plot_points:
            assert point.present == (point.strength > 0.3)

    def test_suggestion_ordering(self, sample_story):
        for text in ("", JANE_AND_JOHN, sample_story):
            ranks = [s.priority.rank for s in analyze_story("Order", text).suggestions]
            assert ranks == sorted(ranks, reverse=True)

    def test_sample_story_summary(self, sample_story):
        analysis = analyze_story("Sample", sample_story)

        assert analysis.structure.type == StructureType.THREE_ACT
        assert [c.name for c in analysis.characters] == ["Anna Reed", "Tom Hale"]
        assert len(analysis.loglines) == 2
        assert "Anna Reed" in analysis.loglines[0].text
        assert analysis.synopsis.treatment.startswith("TREATMENT")

    def test_none_input_rejected(self):
        with pytest.raises(InvalidInputError):
            analyze_story("Title", None)
        with pytest.raises(ValueError):
            analyze_story(None, "text")
        with pytest.raises(InvalidInputError):
            analyze_story("Title", 42)


def test_structure_tie_goes_to_hero_journey():
    """Hero-journey wins ties, save-the-cat must beat three-act outright"""
    classifier = StructureClassifier()

    assert classifier.classify("") == StructureType.HERO_JOURNEY
    assert classifier.classify("a journey with a setup") == StructureType.HERO_JOURNEY
    assert classifier.classify("the setup and the catalyst") == StructureType.THREE_ACT
    assert classifier.classify("the catalyst leads to the finale after a debate") == StructureType.SAVE_THE_CAT


def test_adherence_without_acts():
    assert calculate_adherence([], StructureType.THREE_ACT) == 0.0
    assert calculate_completeness([]) == 0.0


def test_importance_buckets():
    assert importance_for(2) == 0.4
    assert importance_for(4) == 0.7
    assert importance_for(6) == 1.0


def test_pacing_labels():
    assert label_pacing(0.9) == PacingType.TOO_FAST
    assert label_pacing(0.7) == PacingType.FAST
    assert label_pacing(0.5) == PacingType.OPTIMAL
    assert label_pacing(0.3) == PacingType.SLOW
    assert label_pacing(0.0) == PacingType.TOO_SLOW


def test_sentence_tension():
    assert sentence_tension("Nothing happens") == 0.5
    assert sentence_tension("The conflict brought danger") == pytest.approx(1.0)
    assert sentence_tension("They were calm and safe at rest") == pytest.approx(0.0)


def test_plot_point_fallback_description(ids):
    detector = PlotPointDetector(ids=ids)
    points = detector.detect([], StructureType.THREE_ACT)

    assert len(points) == 6
    assert points[2].description == "Midpoint should occur around 50% through the story"
    assert points[0].suggestions == ["Consider adding a clear inciting incident"]


def test_unresolved_thread_gap(ids):
    detector = GapDetector(ids=ids)

    gaps = detector.detect("There was a problem.", [], [])
    assert [gap.type for gap in gaps] == [GapType.UNRESOLVED_THREAD]

    assert detector.detect("There was a problem but it was solved.", [], []) == []


def test_sort_by_priority_is_stable():
    def suggestion(priority, description):
        return StructuralSuggestion(
            id=description,
            type=SuggestionType.ADD_PLOT_POINT,
            priority=priority,
            description=description,
            implementation="",
            expected_impact=""
        )

    ordered = sort_by_priority([
        suggestion(Priority.MEDIUM, "a"),
        suggestion(Priority.CRITICAL, "b"),
        suggestion(Priority.MEDIUM, "c"),
        suggestion(Priority.HIGH, "d"),
    ])

    assert [s.description for s in ordered] == ["b", "d", "a", "c"]


def test_genre_classification(ids):
    classifier = GenreClassifier(ids=ids)
    analysis = classifier.classify("A battle with a weapon, a chase and an explosion in space.", [])

    assert analysis.primary.name == "action"
    assert analysis.primary.confidence == pytest.approx(0.8)
    assert analysis.adherence == analysis.primary.confidence
    assert [g.name for g in analysis.secondary] == ["thriller", "sci-fi"]
    assert len(analysis.conventions) == 3


QUIET_HARBOR = (
    "Mara Quill walked to the harbor. "
    "The boats waited in the fog. "
    "Gulls cried over the docks. "
    "Everyone rested, calm and safe. "
    "Lanterns glowed along the pier. "
    "A storm rolled over the water. "
    "The ropes creaked in the wind. "
    "Morning came slowly."
)

CROWDED_HOUSE = (
    "Ada Vale loved Ben Cole like a brother. "
    "Ada Vale loved Cy Dunn for her wit. "
    "Ada Vale loved Di Hart without a word. "
    "Ada Vale loved Ed Moss in secret. "
    "Ada Vale loved Flo Park most of all. "
    "Ben Cole smiled. Cy Dunn smiled. Di Hart smiled. Ed Moss smiled. Flo Park smiled. "
    "Ada Vale wanted peace. "
    "Ada Vale needed quiet. "
    "Ada Vale sought truth. "
    "Ada Vale hoped for more. "
    "Ada Vale failed twice. "
    "Ada Vale couldn't sleep. "
    "Ada Vale struggled on."
)


class TestPacingDetails:
    """Pacing issues, act bands and the charts built from them"""

    def test_quiet_middle_sags(self, fixed_clock):
        pacing = analyze_story("Harbor", QUIET_HARBOR, clock=fixed_clock).pacing

        assert [issue.type for issue in pacing.issues] == [PacingIssueType.SAGGING_MIDDLE]
        assert RecommendationType.ADD_TENSION in [r.type for r in pacing.recommendations]
        assert pacing.tension_curve[3].tension == 0.0

    def test_act_pacing_bands(self, fixed_clock):
        acts = analyze_story("Harbor", QUIET_HARBOR, clock=fixed_clock).pacing.act_pacing

        assert [act.pacing for act in acts] == [PacingType.TOO_FAST, PacingType.OPTIMAL, PacingType.OPTIMAL]
        assert [act.ideal_duration for act in acts] == [2.0, 4.0, 2.0]
        assert acts[0].issues == ["Act 1 is paced too-fast"]
        assert acts[0].suggestions == ["Consider expanding Act 1"]
        assert acts[1].issues == []

    def test_short_final_act_is_rushed(self):
        def act(number, start, end):
            return Act(id=f"act-{number}", name=f"Act {number}", start_position=start,
                       end_position=end, purpose="", strength=0.5)

        acts = act_pacing([act(1, 0, 5), act(2, 5, 17), act(3, 17, 19)], 20)

        assert [a.pacing for a in acts] == [PacingType.OPTIMAL, PacingType.SLOW, PacingType.TOO_FAST]
        assert acts[1].suggestions == ["Consider tightening Act 2"]
        assert [issue.type for issue in pacing_issues(acts, [])] == [PacingIssueType.RUSHED_ENDING]

    def test_visualization_payload(self, fixed_clock):
        visual = analyze_story("Harbor", QUIET_HARBOR, clock=fixed_clock).visual_data

        ideal = visual.tension_curve.ideal
        assert len(ideal) == 7
        assert (ideal[0].x, ideal[0].y) == (0, 20)
        assert (ideal[-1].x, ideal[-1].y) == (100, 25)

        points = visual.tension_curve.points
        assert len(points) == 8
        assert points[3].x == pytest.approx(37.5)
        assert points[3].y == 0.0
        assert points[0].y == pytest.approx(50.0)

        markers = visual.pacing_chart.issues
        assert [(m.position, m.type, m.severity) for m in markers] == [(25, "sagging-middle", "high")]
        assert [bar.color for bar in visual.pacing_chart.acts] == ["#f59e0b", "#10b981", "#10b981"]
        assert [act.color for act in visual.structure_chart.acts] == [
            "hsl(0, 70%, 60%)", "hsl(120, 70%, 60%)", "hsl(240, 70%, 60%)"
        ]
        assert visual.plot_point_map.structure == "hero-journey"


class TestCharacterDetails:
    """Relationships, development lists and their caps"""

    def test_relationships_capped_at_four(self, ids):
        characters = CharacterExtractor(ids=ids).extract(CROWDED_HOUSE)
        ada = characters[0]

        assert len(characters) == 6
        assert [r.character for r in ada.relationships] == ["Ben Cole", "Cy Dunn", "Di Hart", "Ed Moss"]
        assert all(r.type == RelationshipType.ROMANTIC for r in ada.relationships)
        assert all(r.strength == 0.5 and r.development == "stable" for r in ada.relationships)
        assert [r.character for r in characters[1].relationships] == ["Ada Vale"]

    def test_development_caps(self, ids):
        development = CharacterExtractor(ids=ids).extract(CROWDED_HOUSE)[0].development

        assert development.motivations == [
            "Ada Vale wanted peace", "Ada Vale needed quiet", "Ada Vale sought truth"
        ]
        assert development.weaknesses == ["Ada Vale failed", "Ada Vale couldn't"]
        assert development.conflicts == ["Ada Vale struggled"]
        assert development.change_strength == 0.7

    def test_at_most_four_character_arcs(self, fixed_clock):
        analysis = analyze_story("House", CROWDED_HOUSE, clock=fixed_clock)
        arcs = analysis.visual_data.character_arcs

        assert len(analysis.characters) == 6
        assert [arc.character for arc in arcs] == ["Ada Vale", "Ben Cole", "Cy Dunn", "Di Hart"]
        assert [point.y for point in arcs[0].points] == pytest.approx([30, 71, 65])
        assert arcs[1].color == "hsl(90, 70%, 50%)"


def test_structure_label_replaces_every_hyphen(fixed_clock):
    recommendations = structure_recommendations([], StructureType.SAVE_THE_CAT, 0.0, 0.0)
    assert recommendations[0] == "Consider developing the save the cat structure more fully"

    analysis = analyze_story("Cat", "The catalyst leads to the finale after a debate.", clock=fixed_clock)
    assert analysis.structure.type == StructureType.SAVE_THE_CAT
    assert "follows a save the cat format" in analysis.synopsis.long


def test_clock_read_once_per_story():
    start = datetime(2024, 3, 1, 12, tzinfo=timezone.utc)
    ticks = count()

    analysis = analyze_story("Tick", "A short tale.", clock=lambda: start + timedelta(seconds=next(ticks)))

    assert analysis.upload_date == start
    assert next(ticks) == 1
