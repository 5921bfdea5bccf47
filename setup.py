"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='declgen',
	author='declgen contributors',
	version='0.1.0',
	packages=['declgen'],
	license='MIT',
	description='Emits TypeScript declaration files from type-checked modules of a statically typed functional language',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Developers",
		"Topic :: Software Development :: Compilers",
		"Topic :: Software Development :: Code Generators",
	],
	python_requires='>=3.9',
	install_requires=[
		"booze-tools>=0.6.2.1",
	],
	extras_require={
		"test": ["pytest"],
	},
)
