"""Example usage of the QA structure auditor - Single page analysis."""

from faqaudit import QAStructureAnalyzer, DetectionSettings, QACrawler, Config, generate_report
from faqaudit.report_generator import format_report_summary


SAMPLE_PAGE = """
<html><body>
<div itemscope itemprop="mainEntity" itemtype="https://schema.org/Question">
    <h3 itemprop="name">Peut-on financer un bateau d'occasion ?</h3>
    <div itemscope itemprop="acceptedAnswer" itemtype="https://schema.org/Answer">
        <p itemprop="text">Oui, le prêt personnel couvre aussi les bateaux d'occasion.</p>
    </div>
</div>
<div class="content-container">
    <h2>Comment financer un bateau ?</h2>
    <p>Le prêt personnel est une solution adaptée.</p>
    <p>Comparez les offres avant de signer.</p>
</div>
</body></html>
"""


def main():
    """Run example QA structure analysis."""

    # Analyze markup already in memory
    analyzer = QAStructureAnalyzer(DetectionSettings.from_env())
    result = analyzer.analyze_html(SAMPLE_PAGE, "https://example.com/credit-bateau")

    print(f"Questions found: {result.total_questions}")
    print(f"Valid questions: {result.valid_questions}")
    print(f"Detection methods: {result.detection_methods}")

    for question in result.questions:
        status = "✅" if question.is_valid else "❌"
        print(f"\n{status} [{question.kind.value} #{question.index}] {question.structure.question_title}")
        for issue in question.issues:
            print(f"  • {issue}")

    # Crawl live pages
    print("\n" + "=" * 60)
    print("Live crawl")
    print("=" * 60)

    crawler = QACrawler(config=Config.from_env())
    results = crawler.crawl_multiple_urls(["https://example.com"])
    print(format_report_summary(generate_report(results)))


if __name__ == "__main__":
    main()
