from setuptools import setup, find_packages

setup(
    name='embedlens',
    version='0.1.0',
    author='embedlens developers',
    description='Quality diagnostics for low-dimensional embeddings: graph-overlay plots and neighborhood recall',
    packages=find_packages(include=['embedlens', 'embedlens.*']),
    install_requires=[
        'pyyaml',
        'numpy',
        'scipy',
        'pandas',
        'scikit-learn',
        'matplotlib',
        'seaborn',
        'pydantic>=2',
    ],
    extras_require={
        'test': ['pytest'],
    },
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
    ],
    python_requires='>=3.9',
)
