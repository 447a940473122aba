from setuptools import setup

setup(
    name="viewgen",
    version="0.1.0",
    description="Declarative HTML views rendered to strings.",
    package_dir={"": "src"},
    packages=["viewgen"],
    python_requires=">=3.7",
    extras_require={
        "flask": ["flask", "werkzeug"],
        "test": ["pytest", "flask", "werkzeug"],
    },
)
