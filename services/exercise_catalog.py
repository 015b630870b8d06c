"""
Exercise Catalog for CodeLikeBasics
Static sandbox exercise content for every supported language
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Optional, Tuple

from utils.error_handler import NotFoundError


class LanguageType(Enum):
    MARKUP = 'markup'
    STYLING = 'styling'
    SCRIPTING = 'scripting'
    FRAMEWORK = 'framework'
    GENERAL = 'general'


@dataclass(frozen=True)
class Exercise:
    id: str
    title: str
    description: str
    instructions: str
    starter_code: str
    solution: str
    hint: str
    expected_output: Optional[str] = None

    def to_public_dict(self):
        """
        Exercise without its reference solution
        """
        data = asdict(self)
        del data['solution']
        return data


@dataclass(frozen=True)
class ExerciseSet:
    language_id: str
    language_name: str
    exercises: Tuple[Exercise, ...]

    def __len__(self):
        return len(self.exercises)

    def to_public_dict(self):
        return {
            'language_id': self.language_id,
            'language_name': self.language_name,
            'exercises': [exercise.to_public_dict() for exercise in self.exercises],
            'total_exercises': len(self.exercises)
        }


LANGUAGE_TYPES = {
    'html': LanguageType.MARKUP,
    'css': LanguageType.STYLING,
    'javascript': LanguageType.SCRIPTING,
    'typescript': LanguageType.SCRIPTING,
    'react': LanguageType.FRAMEWORK,
    'nextjs': LanguageType.FRAMEWORK,
    'vue': LanguageType.FRAMEWORK,
}

LANGUAGE_NAMES = {
    'html': 'HTML',
    'css': 'CSS',
    'javascript': 'JavaScript',
    'typescript': 'TypeScript',
    'react': 'React',
    'nextjs': 'Next.js',
    'vue': 'Vue',
    'python': 'Python',
    'java': 'Java',
    'go': 'Go',
    'rust': 'Rust',
    'csharp': 'C#',
}


def detect_language_type(language_id):
    return LANGUAGE_TYPES.get(language_id, LanguageType.GENERAL)


def _html_exercises(language_id, language_name):
    return [
        Exercise(
            id='1',
            title='Your First HTML Page',
            description='Create a basic HTML page with a title and heading.',
            instructions='Create an HTML page with a title "My First Page" and an h1 heading that says "Hello, World!"',
            starter_code=(
                '<!DOCTYPE html>\n<html>\n<head>\n  <!-- Add your title here -->\n</head>\n'
                '<body>\n  <!-- Add your h1 heading here -->\n</body>\n</html>'
            ),
            solution=(
                '<!DOCTYPE html>\n<html>\n<head>\n  <title>My First Page</title>\n</head>\n'
                '<body>\n  <h1>Hello, World!</h1>\n</body>\n</html>'
            ),
            hint='Use <title> in the head and <h1> in the body',
            expected_output='Page displays "Hello, World!" as a heading'
        ),
        Exercise(
            id='2',
            title='Text Elements',
            description='Practice using different text elements.',
            instructions='Create a paragraph with some bold text and some italic text.',
            starter_code='<p>\n  <!-- Make "important" bold and "emphasized" italic -->\n  This is important and this is emphasized.\n</p>',
            solution='<p>\n  This is <strong>important</strong> and this is <em>emphasized</em>.\n</p>',
            hint='Use <strong> for bold and <em> for italic',
            expected_output='Paragraph with bold and italic text'
        ),
        Exercise(
            id='3',
            title='Create a Link',
            description='Make a clickable link to a website.',
            instructions='Create a link to https://google.com with the text "Go to Google"',
            starter_code='<!-- Create your link here -->',
            solution='<a href="https://google.com">Go to Google</a>',
            hint='Use the <a> tag with href attribute',
            expected_output='Clickable link to Google'
        ),
        Exercise(
            id='4',
            title='Add an Image',
            description='Embed an image in your page.',
            instructions='Add an image with src="photo.jpg" and alt text "My Photo"',
            starter_code='<!-- Add your image here -->',
            solution='<img src="photo.jpg" alt="My Photo">',
            hint='Use the <img> tag with src and alt attributes',
            expected_output='Image element with proper attributes'
        ),
        Exercise(
            id='5',
            title='Create a List',
            description='Make an unordered list of items.',
            instructions='Create an unordered list with three fruits: Apple, Banana, Orange',
            starter_code='<!-- Create your list here -->',
            solution='<ul>\n  <li>Apple</li>\n  <li>Banana</li>\n  <li>Orange</li>\n</ul>',
            hint='Use <ul> for the list and <li> for each item',
            expected_output='Bulleted list of three fruits'
        ),
        Exercise(
            id='6',
            title='Build a Form',
            description='Create a simple form with an input and button.',
            instructions='Create a form with a text input for "name" and a submit button',
            starter_code='<form>\n  <!-- Add label, input, and button -->\n</form>',
            solution=(
                '<form>\n  <label for="name">Name:</label>\n'
                '  <input type="text" id="name" name="name" required>\n'
                '  <button type="submit">Submit</button>\n</form>'
            ),
            hint='Use <label>, <input>, and <button> inside <form>',
            expected_output='Form with labeled input and submit button'
        ),
        Exercise(
            id='7',
            title='Semantic Structure',
            description='Use semantic HTML to structure a page.',
            instructions='Create a page with <header>, <main>, and <footer> sections',
            starter_code='<!-- Create semantic structure here -->',
            solution=(
                '<header>\n  <h1>My Website</h1>\n</header>\n'
                '<main>\n  <p>Main content goes here</p>\n</main>\n'
                '<footer>\n  <p>&copy; 2024</p>\n</footer>'
            ),
            hint='Use semantic tags for better structure',
            expected_output='Page with proper semantic sections'
        ),
        Exercise(
            id='8',
            title='Complete Profile Card',
            description='Build a complete profile card combining all concepts.',
            instructions='Create a profile card with: heading (name), image (profile.jpg), paragraph (bio), and link (website)',
            starter_code='<div class="profile-card">\n  <!-- Add heading, image, paragraph, and link -->\n</div>',
            solution=(
                '<div class="profile-card">\n  <h2>John Doe</h2>\n'
                '  <img src="profile.jpg" alt="John\'s profile picture" width="200">\n'
                '  <p>Web developer passionate about creating awesome websites.</p>\n'
                '  <a href="https://johndoe.com">Visit my website</a>\n</div>'
            ),
            hint='Combine h2, img, p, and a tags',
            expected_output='Complete profile card with all elements'
        ),
    ]


def _css_exercises(language_id, language_name):
    return [
        Exercise(
            id='1',
            title='Style a Heading',
            description='Change the color and size of a heading.',
            instructions='Make the h1 blue and 48px in size',
            starter_code='h1 {\n  /* Add your styles here */\n}',
            solution='h1 {\n  color: blue;\n  font-size: 48px;\n}',
            hint='Use color and font-size properties',
            expected_output='Blue heading at 48px'
        ),
        Exercise(
            id='2',
            title='Class Selector',
            description='Use a class selector to style elements.',
            instructions='Create a .highlight class with yellow background',
            starter_code='/* Create your class here */',
            solution='.highlight {\n  background-color: yellow;\n}',
            hint='Use a dot (.) for class selectors',
            expected_output='Yellow highlighted elements'
        ),
        Exercise(
            id='3',
            title='Box Model',
            description='Practice padding, border, and margin.',
            instructions='Give the .box class: 20px padding, 2px solid black border, 10px margin',
            starter_code='.box {\n  /* Add box model properties */\n}',
            solution='.box {\n  padding: 20px;\n  border: 2px solid black;\n  margin: 10px;\n}',
            hint='Use padding, border, and margin properties',
            expected_output='Box with spacing and border'
        ),
        Exercise(
            id='4',
            title='Flexbox Centering',
            description='Use flexbox to center content.',
            instructions='Make .container a flex container that centers its content both horizontally and vertically',
            starter_code='.container {\n  display: flex;\n  /* Add centering properties */\n}',
            solution='.container {\n  display: flex;\n  justify-content: center;\n  align-items: center;\n}',
            hint='Use justify-content and align-items',
            expected_output='Centered content'
        ),
        Exercise(
            id='5',
            title='Hover Effect',
            description='Add a hover effect to buttons.',
            instructions='Make buttons change to dark blue background on hover',
            starter_code='button {\n  background-color: blue;\n}\n\n/* Add hover state */',
            solution='button {\n  background-color: blue;\n}\n\nbutton:hover {\n  background-color: darkblue;\n}',
            hint='Use the :hover pseudo-class',
            expected_output='Button changes color on hover'
        ),
        Exercise(
            id='6',
            title='Responsive Grid',
            description='Create a responsive grid layout.',
            instructions='Make a grid with 3 columns and 20px gap',
            starter_code='.grid {\n  display: grid;\n  /* Add grid properties */\n}',
            solution='.grid {\n  display: grid;\n  grid-template-columns: repeat(3, 1fr);\n  gap: 20px;\n}',
            hint='Use grid-template-columns and gap',
            expected_output='3-column grid with spacing'
        ),
        Exercise(
            id='7',
            title='CSS Animation',
            description='Create a fade-in animation.',
            instructions='Create a fadeIn animation that goes from opacity 0 to 1',
            starter_code='@keyframes fadeIn {\n  /* Add animation keyframes */\n}\n\n.fade {\n  animation: fadeIn 1s ease;\n}',
            solution=(
                '@keyframes fadeIn {\n  from {\n    opacity: 0;\n  }\n  to {\n    opacity: 1;\n  }\n}\n\n'
                '.fade {\n  animation: fadeIn 1s ease;\n}'
            ),
            hint='Use from and to in @keyframes',
            expected_output='Element fades in smoothly'
        ),
        Exercise(
            id='8',
            title='Complete Card Design',
            description='Style a complete card component.',
            instructions=(
                'Style .card with: white background, 20px padding, 10px border-radius, '
                'shadow, and hover effect that lifts it up'
            ),
            starter_code='.card {\n  /* Add all styles */\n}\n\n.card:hover {\n  /* Add hover effect */\n}',
            solution=(
                '.card {\n  background-color: white;\n  padding: 20px;\n  border-radius: 10px;\n'
                '  box-shadow: 0 4px 6px rgba(0, 0, 0, 0.1);\n  transition: transform 0.3s ease;\n}\n\n'
                '.card:hover {\n  transform: translateY(-5px);\n  box-shadow: 0 8px 12px rgba(0, 0, 0, 0.15);\n}'
            ),
            hint='Combine multiple properties and use transform',
            expected_output='Styled card with hover lift effect'
        ),
    ]


def _scripting_exercises(language_id, language_name):
    is_typescript = 'typescript' in language_id

    if is_typescript:
        variables_solution = 'let name: string = "Alice";\nlet age: number = 25;'
        greet_solution = 'function greet(name: string): string {\n  return `Hello, ${name}!`;\n}'
    else:
        variables_solution = 'let name = "Alice";\nlet age = 25;'
        greet_solution = 'function greet(name) {\n  return `Hello, ${name}!`;\n}'

    return [
        Exercise(
            id='1',
            title='Create Variables',
            description='Practice declaring variables.',
            instructions='Create a variable called "name" with your name and a variable "age" with your age',
            starter_code='// Declare your variables here',
            solution=variables_solution,
            hint='Use let or const to declare variables',
            expected_output='Variables created successfully'
        ),
        Exercise(
            id='2',
            title='Write a Function',
            description='Create a function that greets someone.',
            instructions='Write a function called greet that takes a name and returns "Hello, [name]!"',
            starter_code='// Write your function here',
            solution=greet_solution,
            hint='Use template literals with backticks',
            expected_output='Function returns greeting message'
        ),
        Exercise(
            id='3',
            title='If/Else Statement',
            description='Use conditional logic.',
            instructions='Write a function isAdult(age) that returns true if age >= 18, otherwise false',
            starter_code='function isAdult(age) {\n  // Write your if/else here\n}',
            solution='function isAdult(age) {\n  if (age >= 18) {\n    return true;\n  } else {\n    return false;\n  }\n}',
            hint='Use if (condition) { } else { }',
            expected_output='Returns true for 18+, false otherwise'
        ),
        Exercise(
            id='4',
            title='For Loop',
            description='Loop through numbers.',
            instructions='Write a function printNumbers() that logs numbers 1 to 5 using a for loop',
            starter_code='function printNumbers() {\n  // Write your for loop here\n}',
            solution='function printNumbers() {\n  for (let i = 1; i <= 5; i++) {\n    console.log(i);\n  }\n}',
            hint='Use for (let i = 1; i <= 5; i++)',
            expected_output='Logs 1, 2, 3, 4, 5'
        ),
        Exercise(
            id='5',
            title='Array Operations',
            description='Work with arrays.',
            instructions='Create an array of fruits and add "grape" to it using push()',
            starter_code='let fruits = ["apple", "banana", "orange"];\n// Add grape to the array',
            solution='let fruits = ["apple", "banana", "orange"];\nfruits.push("grape");',
            hint='Use array.push() to add items',
            expected_output='Array contains 4 fruits'
        ),
        Exercise(
            id='6',
            title='Object Creation',
            description='Create and use objects.',
            instructions='Create a person object with properties: name, age, and city',
            starter_code='// Create your object here',
            solution='let person = {\n  name: "Alice",\n  age: 25,\n  city: "New York"\n};',
            hint='Use { key: value } syntax',
            expected_output='Object with three properties'
        ),
        Exercise(
            id='7',
            title='Array Methods',
            description='Use array map method.',
            instructions='Use map() to double all numbers in the array [1, 2, 3, 4, 5]',
            starter_code='let numbers = [1, 2, 3, 4, 5];\nlet doubled = // Use map here',
            solution='let numbers = [1, 2, 3, 4, 5];\nlet doubled = numbers.map(n => n * 2);',
            hint='Use numbers.map(n => n * 2)',
            expected_output='[2, 4, 6, 8, 10]'
        ),
        Exercise(
            id='8',
            title='Complete Calculator',
            description='Build a calculator with multiple functions.',
            instructions='Create functions: add(a, b), subtract(a, b), multiply(a, b), divide(a, b)',
            starter_code='// Create your calculator functions',
            solution=(
                'function add(a, b) { return a + b; }\n'
                'function subtract(a, b) { return a - b; }\n'
                'function multiply(a, b) { return a * b; }\n'
                'function divide(a, b) { return a / b; }'
            ),
            hint='Each function takes two parameters and returns the result',
            expected_output='All calculator operations work'
        ),
    ]


def _python_exercises():
    return [
        Exercise(
            id='1',
            title='Variables in Python',
            description='Create variables in Python.',
            instructions='Create a variable "name" with your name and "age" with your age, then print them',
            starter_code='# Create your variables here',
            solution='name = "Alice"\nage = 25\nprint(f"Name: {name}, Age: {age}")',
            hint='Use = to assign values, f-strings to print',
            expected_output='Name: Alice, Age: 25'
        ),
        Exercise(
            id='2',
            title='Define a Function',
            description='Create a Python function.',
            instructions='Write a function greet(name) that returns "Hello, [name]!"',
            starter_code='# Define your function here',
            solution='def greet(name):\n    return f"Hello, {name}!"',
            hint='Use def function_name(params):',
            expected_output='Function returns greeting'
        ),
        Exercise(
            id='3',
            title='If/Else in Python',
            description='Use conditional statements.',
            instructions='Write a function is_adult(age) that returns True if age >= 18',
            starter_code='def is_adult(age):\n    # Write your if/else here',
            solution='def is_adult(age):\n    if age >= 18:\n        return True\n    else:\n        return False',
            hint='Remember Python uses indentation',
            expected_output='Returns True/False based on age'
        ),
        Exercise(
            id='4',
            title='For Loop',
            description='Loop through a range.',
            instructions='Write a function that prints numbers 1 to 5 using a for loop',
            starter_code='def print_numbers():\n    # Write your loop here',
            solution='def print_numbers():\n    for i in range(1, 6):\n        print(i)',
            hint='Use for i in range(1, 6):',
            expected_output='Prints 1, 2, 3, 4, 5'
        ),
        Exercise(
            id='5',
            title='Lists',
            description='Work with Python lists.',
            instructions='Create a list of fruits and add "grape" using append()',
            starter_code='fruits = ["apple", "banana", "orange"]\n# Add grape to the list',
            solution='fruits = ["apple", "banana", "orange"]\nfruits.append("grape")',
            hint='Use list.append(item)',
            expected_output='List contains 4 fruits'
        ),
        Exercise(
            id='6',
            title='Dictionaries',
            description='Create a Python dictionary.',
            instructions='Create a person dictionary with keys: name, age, city',
            starter_code='# Create your dictionary here',
            solution='person = {\n    "name": "Alice",\n    "age": 25,\n    "city": "New York"\n}',
            hint='Use {key: value} syntax',
            expected_output='Dictionary with three keys'
        ),
        Exercise(
            id='7',
            title='Classes',
            description='Define a Python class.',
            instructions='Create a Person class with __init__(name) and greet() method',
            starter_code='# Define your class here',
            solution=(
                'class Person:\n    def __init__(self, name):\n        self.name = name\n    \n'
                '    def greet(self):\n        return f"Hi, I\'m {self.name}"'
            ),
            hint='Use class ClassName: and def __init__(self):',
            expected_output='Person class with name and greet method'
        ),
        Exercise(
            id='8',
            title='File Writing',
            description='Write data to a file.',
            instructions='Write "Hello, File!" to a file called output.txt',
            starter_code='# Write to file here',
            solution='with open("output.txt", "w") as file:\n    file.write("Hello, File!")',
            hint='Use with open("file.txt", "w") as file:',
            expected_output='File created with text'
        ),
    ]


def _general_exercises(language_id, language_name):
    if 'python' in language_id:
        return _python_exercises()

    # Generic exercises for every other language
    return [
        Exercise(
            id='1',
            title=f'Variables in {language_name}',
            description=f'Practice creating variables in {language_name}.',
            instructions='Create variables to store your name and age',
            starter_code='// Create your variables here',
            solution='// Example solution\nlet name = "Alice";\nlet age = 25;',
            hint='Use appropriate variable declaration syntax',
            expected_output='Variables created'
        ),
        Exercise(
            id='2',
            title='Functions',
            description='Write a simple function.',
            instructions='Create a function that adds two numbers',
            starter_code='// Write your function here',
            solution='function add(a, b) {\n  return a + b;\n}',
            hint='Functions take parameters and return values',
            expected_output='Function adds numbers'
        ),
        Exercise(
            id='3',
            title='Loops',
            description='Practice using loops.',
            instructions='Write a loop that prints numbers 1 to 5',
            starter_code='// Write your loop here',
            solution='for (let i = 1; i <= 5; i++) {\n  console.log(i);\n}',
            hint='Use a for loop',
            expected_output='Prints 1-5'
        ),
    ]


# Framework languages have no dedicated content yet and use the general set
EXERCISE_GENERATORS = {
    LanguageType.MARKUP: _html_exercises,
    LanguageType.STYLING: _css_exercises,
    LanguageType.SCRIPTING: _scripting_exercises,
    LanguageType.FRAMEWORK: _general_exercises,
    LanguageType.GENERAL: _general_exercises,
}


def get_exercise_set(language_id, language_name=None):
    """
    Build the sandbox exercise set for a language.
    The display name defaults to the known name for the id, or the id itself.
    """
    language_id = language_id.strip().lower()
    if not language_id:
        raise NotFoundError("Language not found")

    if not language_name:
        language_name = LANGUAGE_NAMES.get(language_id, language_id.capitalize())

    generator = EXERCISE_GENERATORS[detect_language_type(language_id)]
    exercises = generator(language_id, language_name)

    return ExerciseSet(
        language_id=language_id,
        language_name=language_name,
        exercises=tuple(exercises)
    )


def get_exercise(language_id, exercise_id, language_name=None):
    exercise_set = get_exercise_set(language_id, language_name)
    for exercise in exercise_set.exercises:
        if exercise.id == str(exercise_id):
            return exercise
    raise NotFoundError(f"Exercise {exercise_id} not found for {exercise_set.language_name}")
