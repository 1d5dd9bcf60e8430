import setuptools

setuptools.setup(
	name='digit-print',
	version='0.1.0',
	packages=[
		'digitprint',
	],
	python_requires='>=3.9',
	description='Pretty-print long sequences of decimal digits in rows and columns with a running count',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Topic :: Text Processing",
		"Development Status :: 3 - Alpha",
    ],
)
